#!/usr/bin/env python3
"""
Writing tool output into the reports folder, and cleaning it afterwards
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
import shutil
from typing import Iterable
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

REPORT_ENCODING = "utf-8"
REPORT_ERRORS   = "surrogateescape"

def reset_folder(folder:pl.Path) -> None:
    if folder.exists():
        logging.info("Clearing Reports Folder: %s", folder)
        shutil.rmtree(folder)

    folder.mkdir(parents=True)

def append_report(target:pl.Path, *chunks:str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, 'a', encoding=REPORT_ENCODING, errors=REPORT_ERRORS) as f:
        for chunk in chunks:
            if not bool(chunk):
                continue
            f.write(chunk if chunk.endswith("\n") else chunk + "\n")

def strip_log_lines(fpath:pl.Path, prefixes:Iterable[str]) -> None:
    """ Rewrite fpath without the lines that start with one of the prefixes.

    Goes through a `.1` sibling, which replaces fpath.
    A file left with no lines becomes a single newline.
    Lines are split on '\n' only, with a trailing '\r' dropped,
    and bytes that are not utf-8 are carried through unchanged.
    """
    prefixes = tuple(prefixes)
    temp     = fpath.with_name(fpath.name + ".1")
    lines    = fpath.read_text(encoding=REPORT_ENCODING, errors=REPORT_ERRORS).split("\n")
    if lines[-1] == "":
        lines.pop()

    kept = [line for line in (x.removesuffix("\r") for x in lines)
            if not line.startswith(prefixes)]

    text = "\n".join(kept) + "\n" if bool(kept) else "\n"
    temp.write_text(text, encoding=REPORT_ENCODING, errors=REPORT_ERRORS, newline="")

    temp.replace(fpath)

def strip_report_folder(folder:pl.Path, prefixes:Iterable[str]) -> list[pl.Path]:
    prefixes = tuple(prefixes)
    cleaned  = []
    for fpath in sorted(folder.rglob("*")):
        if not fpath.is_file():
            continue
        logging.info("Found the report file: %s", fpath)
        strip_log_lines(fpath, prefixes)
        cleaned.append(fpath)

    return cleaned

def relocate(source:pl.Path, target:pl.Path) -> bool:
    if not source.exists():
        return False

    target.parent.mkdir(parents=True, exist_ok=True)
    logging.info("Moving %s to %s", source, target)
    shutil.move(str(source), str(target))
    return True
