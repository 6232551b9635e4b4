import sys
from setuptools import setup

if sys.version_info.major < 3:
    sys.exit('Sorry, this library only supports Python 3')

setup(
    name='squishyid',
    packages=['squishyid'],
    include_package_data=True,
    version='0.1.0',
    description='Shortens and obfuscates integer IDs using a custom key by Little Fish Solutions LTD',
    author='Stephen Brown (Little Fish Solutions LTD)',
    author_email='opensource@littlefish.solutions',
    keywords=['flask', 'id', 'obfuscation', 'shortener', 'base conversion'],
    classifiers=[
        'License :: OSI Approved :: Apache Software License',
        'Framework :: Flask',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries'
    ],
    install_requires=[
        'Flask>=2.0.0',
        'Werkzeug>=2.0.0',
        'Jinja2>=3.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0'
        ],
    }
)
