#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for checking payload files against a schema."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from ..config import validator_config
from ..exceptions import SchemaDefinitionError
from ..schema import check_hints
from . import PAYLOAD_SUFFIXES, check_files, load_schema_type
from .source_location import SourceLocation, format_source

logger = logging.getLogger(__name__)


def find_payload_files(paths: List[str]) -> List[Path]:
    """Collect JSON/YAML payload files, descending into directories."""
    found = set()
    for path in map(Path, paths):
        if path.is_dir():
            found.update(p for p in path.rglob('*') if p.is_file() and p.suffix in PAYLOAD_SUFFIXES)
        elif path.is_file() and path.suffix in PAYLOAD_SUFFIXES:
            found.add(path)
        elif path.exists():
            logger.warning(f"Not a JSON/YAML payload: {path}")
        else:
            logger.warning(f"Path does not exist: {path}")
    return sorted(found)


def _print_human(results) -> None:
    for result in results:
        if result.ok:
            continue
        print(f"\n{result.file_path}:")
        for error in result.errors:
            line_info = f":{error['line']}" if 'line' in error else ""
            loc = SourceLocation(yaml_path=error.get('yaml_path'))
            print(f"  ERROR{line_info}: {error['message']}{format_source(loc)}")


def _print_github_actions(results) -> None:
    for result in results:
        for error in result.errors:
            print(
                f"::error file={result.file_path},line={error.get('line', 1)},"
                f"col={error.get('column', 1)}::{error['message']}"
            )


def main(argv: List[str] | None = None) -> int:
    """Main entry point for the checker CLI."""
    parser = argparse.ArgumentParser(
        prog='dto-validator-check',
        description='Validate JSON/YAML payload files against a dataclass schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'schema',
        help="Schema reference in the form 'package.module:ClassName'",
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Payload files or directories to check (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--strict-hints',
        action='store_true',
        help='Fail when the schema carries hints that match no rule',
    )

    args = parser.parse_args(argv)
    validator_config.set_logging()

    if not args.paths:
        args.paths = ['.']

    try:
        schema_type = load_schema_type(args.schema)
        if args.strict_hints:
            check_hints(schema_type)
    except SchemaDefinitionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    payload_files = find_payload_files(args.paths)
    if not payload_files:
        print("No JSON/YAML payload files found.", file=sys.stderr)
        return 1

    if args.format == 'human':
        logger.info(f"Checking {len(payload_files)} files against {args.schema}")
    results = check_files(schema_type, payload_files)

    if args.format == 'json':
        output = {
            'schema': args.schema,
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif args.format == 'github-actions':
        _print_github_actions(results)
    else:
        _print_human(results)

    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        return 1
    if args.format == 'human':
        print(f"Check succeeded: {len(results)} files valid.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
