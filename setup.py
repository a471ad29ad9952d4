from setuptools import setup, find_packages

setup(
    name='monkey-interpreter',
    version='0.1.0',
    description='Tree-walking evaluator for the Monkey language',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'monkey = monkey.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
