from setuptools import find_packages, setup


setup(
    name = 'hfspaths',
    version = '0.1.0',
    description = 'Convert HFS paths into POSIX paths',
    license = 'MIT',
    packages = find_packages(exclude=['tests*']),
    python_requires = '>=3.6',
    extras_require = {
        'cli': ['startup'],
    },
)
