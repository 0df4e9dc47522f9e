# Copyright (C) 2013 Wesley Baugh
from setuptools import setup, find_packages


PROGRAM_NAME = 'inferpost'
VERSION = '0.1'
DESCRIPTION = ('Infer the topic of forum posts. A Naive Bayes classifier '
               'trained on posts already tagged by topic, such as course '
               'Q&A posts from previous terms.')
with open('requirements.txt') as f:
    REQUIREMENTS = f.read()
with open('README.md') as f:
    LONG_DESCRIPTION = f.read()


setup(
    name=PROGRAM_NAME,
    version=VERSION,
    packages=find_packages(),

    install_requires=REQUIREMENTS,
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['inferpost = inferpost.main:main'],
    },

    author="Wesley Baugh",
    author_email="wesley@bwbaugh.com",
    url="http://www.github.com/bwbaugh/{0}".format(PROGRAM_NAME),
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    license='Creative Commons Attribution-NonCommercial-ShareAlike 3.0 '
            'Unported License',
    classifiers=["Intended Audience :: Developers",
                 "Intended Audience :: Science/Research",
                 "Natural Language :: English",
                 "Programming Language :: Python",
                 "Programming Language :: Python :: 3",
                 "Topic :: Scientific/Engineering :: Artificial Intelligence",
                 "Topic :: Scientific/Engineering :: Information Analysis",
                 "Topic :: Software Development :: Libraries :: Python Modules",
                 "Topic :: Text Processing :: Linguistic"],
)
