from setuptools import setup, find_packages

setup(
    name='ixheap',
    version='0.1.0',
    description='In-place indexed binary heap over caller-owned storage',
    author='Your Name',
    packages=find_packages(exclude=['tests', 'scripts']),
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.21.0',
        'pyyaml>=6.0',
        'tqdm>=4.62.0',
        'loguru>=0.6.0',
    ],
    extras_require={
        'dev': [
            'pytest>=6.0.0',
        ],
    }
)
