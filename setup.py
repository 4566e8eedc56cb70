"""Setup script for RoadGrid package."""

from setuptools import find_packages, setup

setup(
    name='roadgrid',
    version='0.1.0',
    author='RoadGrid Team',
    author_email='example@example.com',
    description='Procedural grid road network generation with roadside trees and terrain sizing',
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/example/roadgrid',
    packages=find_packages(include=['roadgrid', 'roadgrid.*']),
    include_package_data=True,
    package_data={
        'roadgrid.config': ['*.yaml'],
    },
    scripts=['scripts/generate_road_network.py'],
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pillow',
        'pyyaml',
    ],
    extras_require={
        'dev': [
            'pytest',
            'flake8',
            'black',
        ],
    },
)
