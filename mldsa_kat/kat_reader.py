"""
Reader for the `key = value` KAT files of the ML-DSA reference
implementations (the *_hedged_pure.rsp test cases).

The files have no explicit record separator. A record ends where a key
repeats: that line already belongs to the next record, so it is held
back and replayed on the following call.

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, TextIO

from .errors import MalformedLine, MissingField

SEPARATOR = ' = '

@dataclass(frozen=True)
class KATInput:
    """A single test case, every field still hex encoded"""

    xi: str   # seed
    rng: str  # signing randomness
    pk: str
    sk: str
    msg: str
    sm: str   # signature || message
    ctx: str

    FIELDS = ('xi', 'rng', 'pk', 'sk', 'msg', 'sm', 'ctx')

    @classmethod
    def from_record(cls, record: dict[str, str]) -> KATInput:
        for field in cls.FIELDS:
            if field not in record:
                raise MissingField(field)
        return cls(**{field: record[field] for field in cls.FIELDS})

def split_key_value(line: str, line_number: int) -> tuple[str, str]:
    splits = line.split(SEPARATOR)
    if len(splits) != 2:
        raise MalformedLine(line_number, line)
    return splits[0], splits[1]

class KatReader:
    def __init__(self, file: TextIO):
        self.file = file
        self.line_number = 0
        self.records_read = 0
        self.__pending = None

    def next_line(self) -> tuple[int, str] | None:
        if self.__pending is not None:
            pending = self.__pending
            self.__pending = None
            return pending

        while True:
            line = self.file.readline()

            if line == "":
                return None # eof

            self.line_number += 1

            # Only the line terminator is removed, an empty value such as "ctx = " is legal
            line = line.rstrip('\r\n')

            if line == "" or line.startswith('#'):
                continue

            return (self.line_number, line)

    def next_record(self) -> dict[str, str] | None:
        record = {}

        while True:
            entry = self.next_line()

            if entry is None:
                break

            line_number, line = entry
            key, value = split_key_value(line, line_number)

            if key in record:
                # First line of the next record
                self.__pending = entry
                break

            record[key] = value

        if not record:
            return None

        self.records_read += 1
        logging.debug("Read KAT record %d with %d fields", self.records_read, len(record))
        return record

    def read_records(self) -> Iterator[dict[str, str]]:
        while True:
            record = self.next_record()
            if record is None:
                return
            yield record

    def read_kats(self) -> Iterator[KATInput]:
        for record in self.read_records():
            yield KATInput.from_record(record)

def stream_kats(file: TextIO) -> Iterator[KATInput]:
    return KatReader(file).read_kats()
