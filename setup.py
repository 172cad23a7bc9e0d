from setuptools import setup

setup(
    name='obfuscated-id',
    version='1.0',
    description='Reversible obfuscation of sequential integer IDs into short URL-safe strings.',
    python_requires='>=3.11',
    py_modules=[
        'app',
        'config',
        'core_logic',
        'encoding',
        'models',
        'mymath',
        'obfuscation',
        'primes',
        'schemas',
    ],
    install_requires=[
        'fastapi',
        'pydantic>=2',
        'slowapi',
        'uvicorn',
    ],
    extras_require={
        'test': ['pytest', 'httpx'],
    },
)
