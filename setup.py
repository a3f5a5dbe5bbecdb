from setuptools import setup, find_packages

setup(
    name='PyQueryString',
    version='1.0.0',

    description='Query string parsing and building with bracket array support',
    packages=find_packages(exclude=['tests', 'tests.*']),
    platforms='any',
    python_requires='>=3.7',

    install_requires=[],

    extras_require={
        'test': [
            'pytest'
        ]
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3'
    ],
)
