from setuptools import setup, find_packages

setup(
    name = 'turtledraw',
    version = '0.1.0',
    description = ('Turtle graphics as a stream of states, fitted onto any screen'),
    license = 'AGPLv3+',
    keywords = "turtle graphics svg braille terminal drawing repl",
    scripts = [],
    packages = find_packages(
        exclude = ['contrib', 'docs', 'tests'],
    ),
    python_requires = '>=3.8',
    install_requires = [
        'lark>=1.0.0',
        'pygments<3.0.0',
        'prompt-toolkit>=2.0.0',
    ],
    extras_require = {
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": [
            "turtledraw=turtledraw.cli:main",
        ]
    },
    classifiers = [
        "Development Status :: 4 - Beta",
        "Topic :: Multimedia :: Graphics",
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
