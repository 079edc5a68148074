import codecs

from setuptools import find_namespace_packages
from setuptools import setup

entry_points = {
    "z3c.autoinclude.plugin": [
        'target = nti.app',
    ],
}

TESTS_REQUIRE = [
    'coverage',
    'fudge',
    'nti.testing',
    'PyHamcrest',
    'zope.testrunner',
]


def _read(fname):
    with codecs.open(fname, encoding='utf-8') as f:
        return f.read()


setup(
    name='nti.app.pyramid_extras',
    version="0.0.1.dev0",
    author='NextThought',
    description="jqGrid builders and language prefixed URLs for pyramid.",
    long_description=(_read('README.rst') + '\n\n' + _read("CHANGES.rst")),
    license='Apache',
    keywords='pyramid zope i18n jqgrid',
    classifiers=[
        'Framework :: Pyramid',
        'Framework :: Zope :: 3',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
    zip_safe=True,
    packages=find_namespace_packages('src', include=['nti.*']),
    package_dir={'': 'src'},
    include_package_data=True,
    tests_require=TESTS_REQUIRE,
    install_requires=[
        'pyramid',
        'setuptools',
        'simplejson',
        'WebOb',
        'zope.component',
        'zope.configuration',
        'zope.i18n',
        'zope.interface',
    ],
    extras_require={
        'test': TESTS_REQUIRE,
        'docs':  [
            'Sphinx',
            'repoze.sphinx.autointerface',
            'sphinx_rtd_theme',
        ] + TESTS_REQUIRE,
    },
    entry_points=entry_points,
    python_requires=">=3.8",
)
