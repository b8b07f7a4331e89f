"""
Dedupe a list of names, folding nick names together

This example demonstrates:
- Whitespace separated records (regex separator)
- Keys on first name and surname, case-insensitive
- An alias table so Bob, Rob and Robert compare equal
- Writing names_uniqs.txt and names_dupes.txt beside the input
"""
import re
import tempfile
from pathlib import Path

from record_deduper import Deduper
from record_deduper.common.logging import setup_logging


NAMES = [
    "100 Robert   Smith    ",
    "101 Bob      Smith    ",
    "102 John     Brown    ",
    "103 Jack     White    ",
    "104 Bob      Black    ",
    "105 Rob      Smith    ",
]

NICK_NAMES = {'Bob': 'Robert', 'Rob': 'Robert'}


def main():
    """Run the nick name dedupe"""

    logger = setup_logging(level="INFO")
    logger.info("=" * 60)
    logger.info("Name Dedupe with Nick Name Aliases")
    logger.info("=" * 60)

    work_dir = Path(tempfile.mkdtemp(prefix="record_deduper_"))
    input_file = work_dir / "names.txt"
    input_file.write_text("\n".join(NAMES) + "\n")

    logger.info(f"Input: {input_file}")
    logger.info("")

    result = (Deduper()
        .set_field_separator(re.compile(r"\s+"))
        .add_key(field_number=2, ignore_case=True, alias=NICK_NAMES)
        .add_key(field_number=3, ignore_case=True)
        .dedupe_file(input_file))

    logger.info("")
    logger.info("=" * 60)
    logger.info("Dedupe Results")
    logger.info("=" * 60)
    logger.info(f"Records processed: {result.stats.records_processed}")
    logger.info(f"Unique:    {result.stats.unique_count} -> {result.unique_path}")
    logger.info(f"Duplicate: {result.stats.duplicate_count} -> {result.duplicate_path}")
    logger.info(f"Duration:  {result.duration_seconds:.3f}s")

    logger.info("")
    logger.info("Duplicates:")
    for line in Path(result.duplicate_path).read_text().splitlines():
        logger.info(f"  {line}")


if __name__ == "__main__":
    main()
