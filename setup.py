from setuptools import setup

setup(
    name='irctypes',
    version='0.1.0',
    packages=[
        'irctypes',
        'irctypes.rfc1459'
    ],
    install_requires=[],
    extras_require={
        'docs': 'sphinx_rtd_theme',    # the Sphinx theme we use
        'tests': 'pytest',             # collect and run tests
        'coverage': 'pytest-cov'       # get test case coverage
    },

    keywords='irc library python3 modes names nickname parsing',
    description='Typed, validated IRC protocol objects: identifiers, mode strings and NAMES entries.',
    license='BSD',

    python_requires='>=3.6',
    zip_safe=True,
    test_suite='tests'
)
