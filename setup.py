from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description  =  fh.read()

setup(
    name = 'hilbertpy',
    version = '0.1.0',
    author = 'Zhenyu Wei',
    author_email = 'zhenyuwei99@gmail.com',
    description = 'hilbertpy is a python package converting between points of an n-dimensional grid and indices on the hilbert curve',
    long_description = long_description,
    long_description_content_type = "text/markdown",
    keywords = 'Hilbert curve space filling curve spatial index',
    classifiers  =  [
        'Development Status :: 3 - Alpha',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Scientific/Engineering :: Information Analysis',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3.9'
    ],
    packages = find_packages(),
    tests_require = ['pytest', 'pytest-xdist'],
    install_requires = [
        'numpy >= 1.20.0',
        'matplotlib >= 3.0.0',
        'pytest >= 6.2.0',
        'pytest-xdist >= 2.3.0',
        'h5py >= 3.6.0'
    ],
    python_requires = '>=3.9'
)
