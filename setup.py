
import glob
from setuptools import setup, find_packages
from maillog import __version__

setup(
    name='maillog',
    keywords='postfix syslog mail log parser',
    description='Postfix syslog line decoder and counting scripts',
    author='Ilkka Tuohela',
    author_email='hile@iki.fi',
    url='https://github.com/hile/maillog/',
    version=__version__,
    license='PSF',
    packages=find_packages(exclude=('test', 'test.*')),
    scripts=glob.glob('bin/*'),
    python_requires='>=3.6',
    install_requires=(
        'configobj',
    ),
    tests_require=(
        'pytest',
        'pytest-datafiles',
    ),
    extras_require={
        'test': [
            'pytest',
            'pytest-datafiles',
        ],
    },
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Python Software Foundation License',
        'Operating System :: POSIX',
        'Operating System :: MacOS :: MacOS X',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: Email :: Mail Transport Agents',
        'Topic :: System :: Logging',
        'Topic :: System :: Systems Administration',
    ],
)
