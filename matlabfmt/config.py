# -*- coding: utf-8 -*-
"""\
The default formatting options of matlabfmt can be configured via the
``matlabfmt.config`` object. For instance:

.. code-block:: python3

    import matlabfmt
    matlabfmt.config.set('indent_width', 2)

The configurable properties used by matlabfmt are the following:

 * **start_line**: First line to format (1-based);
 * **end_line**: Last line to format, 0 for the end of the file;
 * **indent_width**: Number of spaces per indentation level;
 * **separate_blocks**: Whether to insert blank lines around blocks;
 * **indent_mode**: One of ``all_functions``, ``only_nested_functions`` or
   ``classic``;
 * **add_spaces**: One of ``all_operators``, ``exclude_pow`` or
   ``no_spaces``;
 * **matrix_indent**: One of ``aligned`` or ``simple``.

These values are used by the ``matlabfmt format`` command whenever the
corresponding flag is not given, and by ``matlabfmt.Options.from_config``.

The configuration can be made permanent by using the ``dump`` function of the
``config`` object:

.. code-block:: python3

    matlabfmt.config.dump()

The configuration file is a YAML file stored in the user configuration
directory, as returned by ``appdirs.user_config_dir('matlabfmt')``.


Debug
-----

matlabfmt can also be set to print debugging messages on standard error via:

.. code-block:: python3

    matlabfmt.debug()

To disable debugging messages you can then call:

.. code-block:: python3

    matlabfmt.debug(False)

"""

import os

import yaml
import appdirs


class Config(dict):

    _defaults = {
        'start_line': 1,
        'end_line': 0,
        'indent_width': 4,
        'separate_blocks': True,
        'indent_mode': 'all_functions',
        'add_spaces': 'exclude_pow',
        'matrix_indent': 'aligned'
    }

    def __init__(self, cfg_file=None, **kwargs):
        super().__init__(**{**Config._defaults, **kwargs})
        super().__setattr__('_file', cfg_file)

        cfg_file = self._cfg_file()
        if cfg_file and os.path.isfile(cfg_file):
            with open(cfg_file) as f:
                _config = yaml.safe_load(f)
            if _config:
                self.update(_config)

    def __setattr__(self, key, value):
        self[key] = value

    def __dir__(self):
        return self.keys()

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)

    def __setstate__(self, state):
        pass

    def _cfg_file(self):
        if self._file:
            return self._file
        return os.path.join(
            appdirs.user_config_dir(__package__), 'config.yml'
        )

    def set(self, key, value):
        """Sets a property."""
        self[key] = value

    def reset(self, key=None):
        """Restores the default value of a property, or of all properties."""
        if key is None:
            self.clear()
            self.update(Config._defaults)
        elif key in Config._defaults:
            self[key] = Config._defaults[key]
        else:
            self.pop(key, None)

    def dump(self):
        """Writes the changes to the configuration file."""
        cfg_file = self._cfg_file()
        cfg_dir, __ = os.path.split(cfg_file)
        if cfg_dir:
            os.makedirs(cfg_dir, exist_ok=True)
        with open(cfg_file, 'w') as f:
            yaml.safe_dump(dict(self), f, default_flow_style=False)


config = Config()
