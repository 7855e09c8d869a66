# *****************************************************************
# IonControl:  Copyright 2016 Sandia Corporation
# This Software is released under the GPL license detailed
# in the file "license.txt" in the top-level IonControl directory
# *****************************************************************
import struct

import wrapt

from typesafeenum.OrdinalRegistry import defaultRegistry


class BasicEnum(object):
    """Base class for typesafe enumeration classes.

    A derived class passes label and (optionally) ordinal on to BasicEnum and
    then defines its constants, for example a 3-speed transmission:

    >>> class Speed(BasicEnum):
    ...     pass
    >>> Speed.enableReverseLookup()
    >>> REVERSE = Speed.define('REVERSE', 'Reverse')
    >>> NEUTRAL = Speed.define('NEUTRAL', 'Neutral')
    >>> Speed.NEUTRAL.ordinal
    1

    Equality and hashing only consider the concrete class and the ordinal.
    Ordinals are assigned in construction order unless given explicitly, explicit
    ordinals are not checked for uniqueness.
    """
    __slots__ = ('_label', '_ordinal', '__weakref__')
    _abstractEnum = True
    _registry = defaultRegistry

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name in ('__eq__', '__hash__'):
            if name in cls.__dict__:
                raise TypeError("{0} may not override {1}".format(cls.__name__, name))

    def __init__(self, label, ordinal=-1):
        cls = type(self)
        if cls.__dict__.get('_abstractEnum', False):
            raise TypeError("Can't instantiate abstract enum class {0}".format(cls.__name__))
        if not isinstance(label, str):
            raise TypeError("enum label must be a string, not {0}".format(type(label).__name__))
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise TypeError("enum ordinal must be an integer, not {0}".format(type(ordinal).__name__))
        object.__setattr__(self, '_label', label)
        record = cls._registry.classRecord(cls.enumTag())
        with wrapt.synchronized(record):
            object.__setattr__(self, '_ordinal', record.assign(self, ordinal))

    def __setattr__(self, name, value):
        if name in BasicEnum.__slots__:
            raise AttributeError("enum attribute '{0}' is read only".format(name.lstrip('_')))
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if name in BasicEnum.__slots__:
            raise AttributeError("enum attribute '{0}' can not be deleted".format(name.lstrip('_')))
        super().__delattr__(name)

    @classmethod
    def enumTag(cls):
        """Key of this class in the ordinal registry.
        The class itself unless a string tag is pinned with _enumTag."""
        return cls.__dict__.get('_enumTag') or cls

    @classmethod
    def enableReverseLookup(cls):
        """Has to be called before the first instance of the class is created"""
        cls._registry.registerClass(cls.enumTag())

    @classmethod
    def define(cls, name, label=None, ordinal=-1):
        """Create an instance and bind it to the class attribute name"""
        instance = cls(name if label is None else label, ordinal)
        setattr(cls, name, instance)
        return instance

    @classmethod
    def fromOrdinal(cls, ordinal):
        return cls._registry.lookup(cls.enumTag(), ordinal)

    @classmethod
    def fromBytes(cls, data):
        data = bytes(data)
        if len(data) != 4:
            raise ValueError("expected 4 bytes, got {0}".format(len(data)))
        ordinal, = struct.unpack('<i', data)
        return cls.fromOrdinal(ordinal)

    @classmethod
    def values(cls):
        return cls._registry.instances(cls.enumTag())

    @property
    def label(self):
        return self._label

    @property
    def ordinal(self):
        return self._ordinal

    def getLabel(self):
        return self._label

    def getOrdinal(self):
        return self._ordinal

    def getBytes(self):
        """ordinal as 4 bytes, least significant byte first"""
        return struct.pack('<I', self._ordinal & 0xFFFFFFFF)

    def hashCode(self):
        return self._ordinal

    def toString(self):
        return str(self)

    def __eq__(self, other):
        if other is self:
            return True
        return type(other) is type(self) and other._ordinal == self._ordinal

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return self._ordinal

    def __str__(self):
        return self._label

    def __repr__(self):
        return "<{0}.{1}: {2}>".format(type(self).__name__, self._label, self._ordinal)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self
