from setuptools import setup


with open('README.md', encoding='utf-8') as f:
    readme = f.read()

with open('requirements.txt') as f:
    # Basic functionality requires all the listed dependencies.
    install_req = f.read().split()

setup(
    name = 'flickrsetsyncr',
    version = '0.1.0',  # Keep in sync with flickrsetsyncr.VERSION.
    packages = ['flickrsetsyncr'],
    description = 'Keeps Flickr photosets in sync with tag-based photoset declarations',
    long_description = readme,
    long_description_content_type = 'text/markdown',
    author = 'Brad Conte',
    author_email = 'brad@bradconte.com',
    keywords = 'flickr sync photoset album tag keyword photo',
    python_requires = '>=3.9',
    install_requires = install_req,
    extras_require = {
        'test': ['pytest', 'pyfakefs'],
    },
    entry_points = {
        "console_scripts": [
            "flickrsetsyncr=flickrsetsyncr:cli",
        ]
    },
)
