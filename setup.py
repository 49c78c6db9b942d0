"""
AccessRoute - Multi-modal Accessible Routing Backend

Build script for the accessroute package (FastAPI service + routing core).
"""

from setuptools import setup, find_packages


setup(
    name='accessroute',
    version='1.0.0',
    author='AccessRoute Team',
    description='Multi-modal (subway, bus, walk) accessible route planner for Seoul',
    long_description='''
    Station graph search with transfer costs (Dijkstra), bus route lookup,
    and walking leg composition between two coordinates, enriched with
    accessibility facilities (elevators, ramps, low-floor buses) along the
    selected route. Data comes from the Seoul open data APIs or an embedded
    fixture network.
    ''',
    packages=find_packages(include=['accessroute', 'accessroute.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'uvicorn>=0.23.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'numpy>=1.24',
        'httpx>=0.24.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24.0',
        ],
    },
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: GIS',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
