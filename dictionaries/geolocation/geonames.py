"""
GeonamesLocation -- gazetteer read from a Geonames cities dump

The archive (e.g. cities1000.zip) holds one tab-separated text file;
the columns used are name (1), asciiname (2), alternatenames (3),
latitude (4), longitude (5) and population (14).
"""

import csv
import io
import logging
import zipfile

from dictionaries import compressedfiles, dictconfig
from dictionaries.geolocation.location import Localization, Location

logger = logging.getLogger(__name__)


class GeonamesLocation(Localization):

    def __init__(self, path):
        super().__init__()
        self.path = path
        try:
            self._load()
        except compressedfiles.ERRORS:
            logger.exception('cannot read Geonames dump %s', path)

    def _load(self):
        with zipfile.ZipFile(self.path) as archive:
            members = [n for n in archive.namelist()
                       if n.lower().endswith('.txt')]
            if not members:
                logger.error('no text file in Geonames dump %s', self.path)
                return
            with archive.open(members[0]) as entry:
                reader = csv.reader(
                    io.TextIOWrapper(entry, encoding=dictconfig.GEONAMES_ENCODING),
                    delimiter='\t', quoting=csv.QUOTE_NONE)
                for row in reader:
                    self._parse_row(row)
        logger.info('Geonames: %d places from %s', self.size(), self.path)

    def _parse_row(self, row):
        if len(row) < 6:
            return
        try:
            lat, lon = float(row[4]), float(row[5])
        except ValueError:
            return
        try:
            population = int(row[14])
        except (IndexError, ValueError):
            population = 0
        location = Location(row[1], lat, lon, population)
        self.add(location)
        alternatives = {row[2]}
        alternatives.update(row[3].split(','))
        for name in alternatives:
            name = name.strip()
            if name and name != row[1]:
                self.add(location, name=name)
