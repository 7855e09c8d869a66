# *****************************************************************
# IonControl:  Copyright 2016 Sandia Corporation
# This Software is released under the GPL license detailed
# in the file "license.txt" in the top-level IonControl directory
# *****************************************************************
import logging
import weakref

import wrapt


class EnumError(Exception):
    pass


class AlreadyRegistered(EnumError):
    pass


class NoSuchClass(EnumError, LookupError):
    pass


class UnsupportedLookup(EnumError):
    pass


class NoSuchOrdinal(EnumError, LookupError):
    pass


class EnumClassRecord(object):
    """Bookkeeping for one enum class: the next ordinal to hand out and,
    if reverse lookup was requested, a list of weak references indexed by ordinal."""
    def __init__(self, reverseLookup=False):
        self.nextOrdinal = 0
        self.reverseMap = list() if reverseLookup else None

    def slot(self, ordinal):
        """Return the live instance stored at ordinal or None"""
        if ordinal < 0 or ordinal >= len(self.reverseMap):
            return None
        ref = self.reverseMap[ordinal]
        return ref() if ref is not None else None

    @wrapt.synchronized
    def record(self, ordinal, instance):
        if self.reverseMap is None:
            return
        if ordinal >= len(self.reverseMap):
            self.reverseMap.extend([None] * (ordinal + 1 - len(self.reverseMap)))
        self.reverseMap[ordinal] = weakref.ref(instance)

    @wrapt.synchronized
    def advance(self, usedOrdinal):
        if self.reverseMap is not None:
            ordinal = usedOrdinal + 1
            while ordinal < len(self.reverseMap) and self.slot(ordinal) is not None:
                ordinal += 1
            self.nextOrdinal = ordinal
        return self.nextOrdinal

    @wrapt.synchronized
    def assign(self, instance, ordinal):
        if ordinal < 0:
            ordinal = self.nextOrdinal
            self.nextOrdinal += 1
        if self.reverseMap is not None:
            self.record(ordinal, instance)
            self.advance(ordinal)
        return ordinal

    @wrapt.synchronized
    def live(self):
        return [e for e in (self.slot(i) for i in range(len(self.reverseMap))) if e is not None]


class OrdinalRegistry(object):
    """Maps enum type tags to their EnumClassRecord.

    The tag table is guarded by the registry lock, each record by its own lock.
    A record lock is only taken after the registry lock has been released.
    """
    def __init__(self):
        self._records = dict()

    @wrapt.synchronized
    def _getRecord(self, tag, create=True):
        record = self._records.get(tag)
        if record is None and create:
            record = EnumClassRecord()
            self._records[tag] = record
            logging.getLogger(__name__).debug("Created ordinal record for '{0}'".format(tag))
        return record

    def classRecord(self, tag):
        """Return the record for tag, creating a bare one if needed"""
        return self._getRecord(tag)

    def _lookupRecord(self, tag):
        record = self._getRecord(tag, create=False)
        if record is None:
            logging.getLogger(__name__).debug("No instances created for '{0}'".format(tag))
            raise NoSuchClass("No instances have been created of class '{0}'".format(tag))
        if record.reverseMap is None:
            raise UnsupportedLookup("Class '{0}' was not registered for reverse lookup".format(tag))
        return record

    @wrapt.synchronized
    def registerClass(self, tag):
        """Create the record for tag with reverse lookup enabled.
        Must happen before the first instance of the class is constructed."""
        if tag in self._records:
            logging.getLogger(__name__).debug("'{0}' already has an ordinal record".format(tag))
            raise AlreadyRegistered("registerClass('{0}') called after a record was created".format(tag))
        self._records[tag] = EnumClassRecord(reverseLookup=True)
        logging.getLogger(__name__).debug("Registered '{0}' for reverse lookup".format(tag))

    def isRegistered(self, tag):
        return self._getRecord(tag, create=False) is not None

    def hasReverseLookup(self, tag):
        record = self._getRecord(tag, create=False)
        return record is not None and record.reverseMap is not None

    @wrapt.synchronized
    def tags(self):
        return list(self._records.keys())

    def nextOrdinal(self, tag):
        record = self._getRecord(tag)
        with wrapt.synchronized(record):
            return record.nextOrdinal

    def advanceOrdinal(self, tag, usedOrdinal):
        """Move the counter past usedOrdinal and any occupied slots following it.
        Only has an effect for classes with a reverse map."""
        return self._getRecord(tag).advance(usedOrdinal)

    def recordInstance(self, tag, ordinal, instance):
        self._getRecord(tag).record(ordinal, instance)

    def assignOrdinal(self, tag, instance, ordinal=-1):
        """Assign an ordinal to a newly constructed instance.

        A negative ordinal takes the next value of the counter. Explicit ordinals are
        not checked for uniqueness, the last instance recorded at an ordinal wins.
        """
        return self._getRecord(tag).assign(instance, ordinal)

    def lookup(self, tag, ordinal):
        record = self._lookupRecord(tag)
        with wrapt.synchronized(record):
            instance = record.slot(ordinal)
        if instance is None:
            logging.getLogger(__name__).debug("No instance of '{0}' with ordinal {1}".format(tag, ordinal))
            raise NoSuchOrdinal("No instance exists with the ordinal value of {0}".format(ordinal))
        return instance

    def instances(self, tag):
        """Live instances of the class in ordinal order"""
        return self._lookupRecord(tag).live()


defaultRegistry = OrdinalRegistry()
