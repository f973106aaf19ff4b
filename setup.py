from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name='exprtex',
    version='0.1.0',
    author='I. Chuang',
    author_email='ichuang@mit.edu',
    packages=['exprtex', 'exprtex.test'],
    scripts=[],
    url='http://pypi.python.org/pypi/exprtex/',
    license='LICENSE.txt',
    description='Convert math expressions, numbers and arrays into latex markup',
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'exprtex = exprtex.main:CommandLine',
            ],
        },
    install_requires=['pyparsing>=3.0',
                      'numpy',
                      'pylatexenc>=2.0',
                      ],
    extras_require={
        'test': ['pytest'],
        },
    python_requires='>=3.7',
    package_dir={'exprtex': 'exprtex'},
    test_suite="exprtex.test",
)
