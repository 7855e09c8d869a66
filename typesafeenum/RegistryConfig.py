# *****************************************************************
# IonControl:  Copyright 2016 Sandia Corporation
# This Software is released under the GPL license detailed
# in the file "license.txt" in the top-level IonControl directory
# *****************************************************************
import logging
import os.path
from copy import deepcopy

import yaml

from typesafeenum.OrdinalRegistry import EnumError, OrdinalRegistry


class RegistryConfigError(EnumError):
    pass


class RegistryConfig(object):
    """Lists the enum type tags that get reverse lookup when a registry is created.
    The tags are the strings enum classes pin with _enumTag.

    Example file::

        reverseLookup:
        - myproject.colors.Color
        - myproject.gears.Speed
    """
    defaults = {'reverseLookup': []}

    def __init__(self, filename=None):
        logger = logging.getLogger(__name__)
        self.filename = filename
        self.config = deepcopy(self.defaults)
        if filename is not None and os.path.exists(filename):
            with open(filename, 'r') as f:
                try:
                    yamldata = yaml.safe_load(f)
                except yaml.YAMLError:  # leave defaults if the file is improperly formatted
                    logger.warning('YAML formatting error: unable to read in registry config file {0}'.format(filename))
                else:
                    self._apply(yamldata)
                    logger.info('Registry config file {0} loaded'.format(filename))

    @classmethod
    def fromString(cls, text):
        config = cls()
        try:
            yamldata = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise RegistryConfigError("Unable to parse registry config: {0}".format(e)) from e
        config._apply(yamldata)
        return config

    def _apply(self, yamldata):
        if yamldata is None:
            return
        if not isinstance(yamldata, dict):
            raise RegistryConfigError("Registry config must be a mapping, got {0}".format(type(yamldata).__name__))
        tags = yamldata.get('reverseLookup', [])
        if tags is None:
            tags = []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise RegistryConfigError("'reverseLookup' must be a list of type tags")
        self.config.update(yamldata)
        self.config['reverseLookup'] = list(tags)

    @property
    def reverseLookup(self):
        return self.config['reverseLookup']

    def createRegistry(self):
        registry = OrdinalRegistry()
        for tag in self.reverseLookup:
            registry.registerClass(tag)
        logging.getLogger(__name__).debug("Created registry with reverse lookup for {0}".format(self.reverseLookup))
        return registry

    def save(self, filename=None):
        filename = filename if filename is not None else self.filename
        if filename is None:
            raise RegistryConfigError("No filename given to save the registry config to")
        with open(filename, 'w') as f:
            yaml.dump(self.config, f, default_flow_style=False)
        logging.getLogger(__name__).info('Registry config saved to {0}'.format(filename))
