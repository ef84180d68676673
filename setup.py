"""
Signpost
"""
import codecs
import os
import re

from setuptools import setup, find_packages


with codecs.open(os.path.join(os.path.abspath(os.path.dirname(
        __file__)), 'src', 'signpost', '__init__.py'), 'r', 'latin1') as fp:
    try:
        version = re.findall(r"^__version__ = '([^']+)'\r?$",
                             fp.read(), re.M)[0]
    except IndexError:
        raise RuntimeError('Unable to determine version.')


setup(
    name='signpost',
    version=version,
    license='MIT',
    description='Ordered URL router with pattern matching ' +
                'and reverse routing',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    keywords=['web', 'routing', 'url'],
    python_requires='>=3.8',
    install_requires=[
        'colorama>=0.4.6',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    entry_points="""
         [console_scripts]
         signpost = signpost.__main__:main
    """,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP'
    ],
    zip_safe=False,
)
