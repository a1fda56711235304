#!/usr/bin/env python3
import sys
import os
import os.path as path
import datetime


### -- General options -- ###

# Make autodoc and import work.
if path.exists(path.join('..', 'irctypes')):
    sys.path.insert(0, os.path.abspath('..'))
import irctypes

project = irctypes.__name__
copyright = '{current}, irctypes contributors'.format(current=datetime.date.today().year)
version = release = irctypes.__version__

extensions = [
    # Generate API description from code.
    'sphinx.ext.autodoc',
    # Include full source code with documentation.
    'sphinx.ext.viewcode'
]

exclude_patterns = ['_build']
master_doc = 'index'


### -- HTML output -- ##

# Only set RTD theme if we're building locally.
if os.environ.get('READTHEDOCS', None) != 'True':
    import sphinx_rtd_theme
    html_theme = "sphinx_rtd_theme"
    html_theme_path = [ sphinx_rtd_theme.get_html_theme_path() ]
html_show_sphinx = False


### -- Sphinx customization code -- ##

def skip(app, what, name, obj, skip, options):
    if skip:
        return True
    # ISUPPORT handlers are dispatched by ServerSupport.update(), not called directly.
    if name.startswith('on_isupport_'):
        return True
    return False

def setup(app):
    app.connect('autodoc-skip-member', skip)
