from setuptools import setup, find_packages


setup(name='rotkit',
      version='1.0.0',
      description='Conversions between rotation and direction representations',
      packages=find_packages(include=['rotkit', 'rotkit.*']),
      python_requires='>=3.10',
      install_requires=['numpy'])
