from setuptools import setup, find_namespace_packages

setup(
    name='StructuredNames',
    version='1.0',
    packages=find_namespace_packages(include=['StructuredNames', 'StructuredNames.*']),
    install_requires=[
        'typeguard>=4',
        'typing_extensions',
        'line_profiler',
        'tqdm'
    ],
    extras_require={
        'dev': ['mypy', 'pytest'],
    },
    package_data={
        'StructuredNames': ['py.typed']
    },
    zip_safe=False,  # Required for packages with type hints
)
