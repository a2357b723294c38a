from setuptools import setup

setup(
    name='q3serverlist',
    version='0.1.0',
    description='Lists servers from a Quake III Arena compatible master server',
    author='Your Name',
    author_email='your.email@example.com',
    packages=['q3serverlist'],
    install_requires=[],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'q3serverlist=q3serverlist.cli:main',
        ],
    },
)
