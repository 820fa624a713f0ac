#!/usr/bin/env python
import os
import sys
from typing import List, Optional, Sequence

import chardet


def argv_as_bytes(argv: Optional[Sequence[str]] = None) -> List[bytes]:
    """Command line arguments (without program name) as the OS passed them in.

    `argv` defaults to ``sys.argv[1:]``.
    """
    if argv is None:
        argv = sys.argv[1:]
    return [os.fsencode(arg) for arg in argv]


def decode_bytes(byte_str: bytes) -> str:
    """Decode bytes with the help of chardet"""
    if not byte_str:
        return ""
    encoding = chardet.detect(byte_str).get("encoding")
    if not encoding:
        return byte_str.decode("ascii", "ignore")
    else:
        return byte_str.decode(encoding, "replace")
