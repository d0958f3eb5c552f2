# -*- coding: utf-8 -*-
"""
A static segment tree answering point-containment and range-overlap
queries over a fixed collection of half-open intervals.

BSD-licensed.

"""

from setuptools import setup, find_packages


__version__ = '0.1.0dev'
__license__ = 'BSD'

desc = ('A static segment tree answering point-containment and'
        ' range-overlap queries over fixed half-open intervals.')


if __name__ == '__main__':
    setup(name='segtree',
          version=__version__,
          description=desc,
          long_description=__doc__,
          packages=find_packages(exclude=['tests', 'tests.*']),
          include_package_data=True,
          zip_safe=False,
          python_requires='>=3.7',
          install_requires=['boltons',
                            'lithoxyl'],
          extras_require={'test': ['pytest']},
          license=__license__,
          platforms='any',
          classifiers=['Development Status :: 4 - Beta',
                       'Intended Audience :: Developers',
                       'Topic :: Software Development :: Libraries',
                       'Programming Language :: Python :: 3',
                       'Programming Language :: Python :: Implementation :: CPython',
                       'License :: OSI Approved :: BSD License'])
