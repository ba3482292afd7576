"""
OpenGeoDBLocation -- gazetteer read from a gzipped OpenGeoDB SQL dump

Only two tables are used: geodb_textdata supplies the place names
(text type 500100000), geodb_coordinates the coordinates; the rows are
joined on loc_id.
"""

import csv
import logging
import re

from dictionaries import compressedfiles, dictconfig
from dictionaries.geolocation.location import Localization, Location

logger = logging.getLogger(__name__)

INSERT_PATTERN = re.compile(r'^INSERT INTO (geodb_textdata|geodb_coordinates)'
                            r'\s+VALUES\s*(.*?);?\s*$', re.I)


class OpenGeoDBLocation(Localization):

    """
    Arguments:
        path (str): the .sql.gz dump
        lat_first (bool): True if the dump stores latitude before
            longitude in geodb_coordinates (default False)
    """

    def __init__(self, path, lat_first=False):
        super().__init__()
        self.path = path
        self.lat_first = lat_first
        try:
            self._load()
        except compressedfiles.ERRORS:
            logger.exception('cannot read OpenGeoDB dump %s', path)

    def _load(self):
        names = {}
        coordinates = {}
        with compressedfiles.open_text(self.path) as filehandle:
            for line in filehandle:
                match = INSERT_PATTERN.search(line.strip())
                if match is None:
                    continue
                table, values = match.groups()
                for row in _rows(values):
                    fields = _split_values(row)
                    if table.lower() == 'geodb_textdata':
                        self._parse_textdata(fields, names)
                    else:
                        self._parse_coordinates(fields, coordinates)

        for loc_id, name in names.items():
            if loc_id in coordinates:
                lat, lon = coordinates[loc_id]
                self.add(Location(name, lat, lon, 0))
        logger.info('OpenGeoDB: %d places from %s', self.size(), self.path)

    def _parse_textdata(self, fields, names):
        if len(fields) < 3 or fields[1] != dictconfig.OPENGEODB_NAME_TYPE:
            return
        names.setdefault(fields[0], fields[2])

    def _parse_coordinates(self, fields, coordinates):
        if len(fields) < 4:
            return
        try:
            first, second = float(fields[2]), float(fields[3])
        except ValueError:
            return
        if self.lat_first:
            coordinates[fields[0]] = (first, second)
        else:
            coordinates[fields[0]] = (second, first)


def _rows(values):
    """
    Yield the text inside each top-level pair of parentheses in a
    VALUES list, skipping over quoted strings.
    """
    depth = 0
    start = None
    quoted = False
    i = 0
    while i < len(values):
        char = values[i]
        if quoted:
            if char == '\\':
                i += 1
            elif char == "'":
                if values[i + 1:i + 2] == "'":
                    i += 1
                else:
                    quoted = False
        elif char == "'":
            quoted = True
        elif char == '(':
            if depth == 0:
                start = i + 1
            depth += 1
        elif char == ')' and depth:
            depth -= 1
            if depth == 0:
                yield values[start:i]
        i += 1


def _split_values(row):
    reader = csv.reader([row], quotechar="'", escapechar='\\',
                        skipinitialspace=True)
    return [value.strip() for value in next(reader)]
