#!/usr/bin/env python3
"""
Pipe the homework CSV file into a text file of JSON lines.

Reads ``./csv/nodejs-hw1-ex1.csv`` and writes ``parsed.txt`` in the
current directory.  There are no options; edit the paths below to
convert another file.

Usage:
    python csv_to_text.py
"""

import logging

from users_api.csv_pipe import convert_csv_to_json_lines

SOURCE = "./csv/nodejs-hw1-ex1.csv"
TARGET = "parsed.txt"


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    convert_csv_to_json_lines(SOURCE, TARGET)
