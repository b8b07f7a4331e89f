"""
Output file naming

names.txt -> names_uniqs.txt / names_dupes.txt, in the input's directory.
"""
from pathlib import Path
from typing import Tuple, Union

UNIQUE_SUFFIX = "_uniqs"
DUPLICATE_SUFFIX = "_dupes"


def split_extension(file_name: str) -> Tuple[str, str]:
    """
    Split a base name at its first dot

    A leading dot (hidden file) belongs to the name.

    Returns:
        (name, extension) where extension keeps its dot, or is ''
    """
    dot = file_name.find('.', 1)
    if dot == -1:
        return file_name, ''
    return file_name[:dot], file_name[dot:]


def output_paths(
    input_path: Union[str, Path],
    unique_suffix: str = UNIQUE_SUFFIX,
    duplicate_suffix: str = DUPLICATE_SUFFIX,
) -> Tuple[Path, Path]:
    """
    Derive the unique and duplicate output paths for an input file

    Args:
        input_path: Input file path
        unique_suffix: Marker for the unique output
        duplicate_suffix: Marker for the duplicate output

    Returns:
        (unique_path, duplicate_path)
    """
    path = Path(input_path)
    name, extension = split_extension(path.name)
    return (
        path.with_name(f"{name}{unique_suffix}{extension}"),
        path.with_name(f"{name}{duplicate_suffix}{extension}"),
    )
