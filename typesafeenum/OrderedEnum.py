# *****************************************************************
# IonControl:  Copyright 2016 Sandia Corporation
# This Software is released under the GPL license detailed
# in the file "license.txt" in the top-level IonControl directory
# *****************************************************************
from typesafeenum.BasicEnum import BasicEnum
from typesafeenum.OrdinalRegistry import EnumError


class TypeMismatch(EnumError, TypeError):
    pass


class OrderedEnum(BasicEnum):
    """BasicEnum with a natural ordering by ordinal.
    Instances are only comparable to instances of their own concrete class."""
    __slots__ = ()
    _abstractEnum = True

    def compareTo(self, other):
        if type(other) is not type(self):
            raise TypeMismatch("Attempted to compare an object of class {0} to this object of class {1}."
                               .format(type(other).__name__, type(self).__name__))
        return self._ordinal - other._ordinal

    def __lt__(self, other):
        return self.compareTo(other) < 0

    def __le__(self, other):
        return self.compareTo(other) <= 0

    def __gt__(self, other):
        return self.compareTo(other) > 0

    def __ge__(self, other):
        return self.compareTo(other) >= 0
