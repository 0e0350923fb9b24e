"""
1. pip3 install setuptools
2. python3 setup.py build
3. sudo python3 setup.py install
"""

from setuptools import setup,find_packages
setup(
    name='evmOutput',
    version='0.0.1',
    description='Fixed 60-byte EVM transfer output record: address, amount and asset id',
    install_requires=['base58>=2.0.0'],
    extras_require={'test': ['ecdsa>=0.13']},
    python_requires='>=3.6.7',
    packages=find_packages(exclude=['tests', 'tests.*'])
  )
