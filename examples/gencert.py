"""Populate a certificate request from the command line.

.. code-block:: console

    $ python gencert.py gencert --CN example.com --OU ops --alg rsa --bits 4096 --days 365
"""

import dataclasses
import json
import sys
from dataclasses import dataclass, field
from typing import Annotated

from rich.console import Console

import argvmap
from argvmap import Tag
from argvmap.types import UInt, UInt32


@dataclass
class AlgorithmDetails:
    algorithm: Annotated[str, Tag("alg")] = ""
    key_len: Annotated[UInt, Tag("bits")] = 0


@dataclass
class CertInfo:
    common_name: Annotated[str, Tag("CN")] = ""
    organizational_unit: Annotated[str, Tag("OU")] = ""
    organization: Annotated[str, Tag("O,optional")] = ""
    algorithm: AlgorithmDetails = field(default_factory=AlgorithmDetails)
    days: Annotated[UInt32, Tag("days")] = 0


def main(argv: list[str], console: Console | None = None) -> int:
    console = console or Console()
    if not argv:
        console.print(f"Usage: {sys.argv[0]} <command> [options]")
        return 0

    command, *tokens = argv
    if command != "gencert":
        argvmap.print_error(argvmap.ArgvError(msg=f"'{command}' is not a supported command"))
        return 1

    record = CertInfo()
    try:
        argvmap.parse_argv(record, tokens)
    except argvmap.EmptyArgsError:
        argvmap.print_available(record, console)
        return 0
    except argvmap.ArgvError as e:
        argvmap.print_error(e)
        return 1

    console.print("Parsed parameters:")
    console.print_json(json.dumps(dataclasses.asdict(record)))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
