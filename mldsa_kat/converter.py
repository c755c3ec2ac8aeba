"""
Converts a _hedged_pure KAT file of the ML-DSA reference implementation
(see https://github.com/post-quantum-cryptography/KAT) into a JSON list
of test vectors that also carry the expanded keys and the external mu.

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .errors import ConversionException, MalformedLine
from .kat_reader import KatReader, KATInput
from .primitives import SignatureScheme, DilithiumPyScheme
from .vector import TestVector, compute_test_vector

def parse_arguments(args=None):
    parser = argparse.ArgumentParser(
        prog="mldsa-kat",
        description="Convert ML-DSA known-answer tests to JSON test vectors")
    parser.add_argument("--path", type=str, required=True,
                        help="path to a _hedged_pure test case from post-quantum-cryptography/KAT")
    parser.add_argument("--output", type=str, default=None,
                        help="write the JSON to this file instead of stdout")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", default=False, help="be noisy")
    verbosity.add_argument("--quiet", action="store_true", default=False, help="only report problems")

    return parser.parse_args(args)

def setup_logging(options):
    if options.verbose:
        log_level = logging.DEBUG
    elif options.quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    lh = logging.StreamHandler(sys.stderr)
    lh.setFormatter(logging.Formatter('%(levelname) 7s: %(message)s'))
    logging.getLogger().addHandler(lh)
    logging.getLogger().setLevel(log_level)
    return lh

def convert_kats(file, scheme: SignatureScheme | None = None) -> list[TestVector]:
    """
    Read every test case from `file` and expand it. The first bad test
    case aborts the conversion, no partial list is returned.
    """
    if scheme is None:
        scheme = DilithiumPyScheme()

    reader = KatReader(file)
    vectors = []

    try:
        for record in reader.read_records():
            kat = KATInput.from_record(record)
            vectors.append(compute_test_vector(kat, scheme))
    except MalformedLine as e:
        # raised while the test case was still being read
        e.test_case = reader.records_read + 1
        raise
    except ConversionException as e:
        e.test_case = reader.records_read
        raise

    return vectors

def convert_file(path: str, scheme: SignatureScheme | None = None) -> list[TestVector]:
    with open(path, encoding='utf8') as f:
        return convert_kats(f, scheme)

def vectors_to_json(vectors: list[TestVector]) -> str:
    return json.dumps([v.to_json_dict() for v in vectors], indent=2)

def main(args=None, scheme: SignatureScheme | None = None):
    options = parse_arguments(args)
    lh = setup_logging(options)

    try:
        return run(options, scheme)
    finally:
        logging.getLogger().removeHandler(lh)

def run(options, scheme: SignatureScheme | None = None):
    try:
        vectors = convert_file(options.path, scheme)
    except ConversionException as e:
        logging.error("could not convert %s: %s", options.path, e.describe())
        return 1
    except (OSError, ValueError) as e:
        logging.error("could not convert %s: %s", options.path, e)
        return 1
    except Exception as e: # pylint: disable=broad-except
        logging.error("could not convert %s: %s: %s", options.path, type(e).__name__, e)
        return 1

    output = vectors_to_json(vectors)

    if options.output is not None:
        try:
            with open(options.output, 'w', encoding='utf8') as out:
                print(output, file=out)
        except OSError as e:
            logging.error("could not write %s: %s", options.output, e)
            return 1
    else:
        print(output)

    logging.info("Converted %d test cases from %s", len(vectors), options.path)
    return 0
