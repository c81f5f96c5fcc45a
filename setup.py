# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['twoface',
 'twoface.tools',
 'twoface.tools.fastapi',
 'twoface.util']

package_data = \
{'': ['*']}

extras_require = \
{'fastapi': ['fastapi>=0.100.0'],
 'test': ['pytest>=7.0',
          'pytest-cov>=4.0',
          'httpx>=0.24',
          'nox>=2022.1.7']}

setup_kwargs = {
    'name': 'twoface',
    'version': '0.1.0',
    'description': 'Errors with two faces: internal errors for your logs, external descriptions for your users',
    'long_description': None,
    'author': None,
    'author_email': None,
    'maintainer': None,
    'maintainer_email': None,
    'url': None,
    'packages': packages,
    'package_data': package_data,
    'extras_require': extras_require,
    'python_requires': '>=3.9,<4.0',
}


setup(**setup_kwargs)
