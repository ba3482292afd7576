"""
Location -- place records and the name index shared by all gazetteers
"""

from collections import namedtuple, defaultdict

Location = namedtuple('Location', ['name', 'lat', 'lon', 'population'])


class Localization(object):

    """
    Base class for gazetteer backends: an index of places by name.
    """

    def __init__(self):
        self.index = defaultdict(list)

    def add(self, location, name=None):
        """
        Index a location under its own name, or under an alternative
        name if one is given.
        """
        key = (name or location.name).strip()
        if key:
            self.index[key.lower()].append(location)

    def find(self, name, exact=True):
        """
        Return the list of locations with the given name
        (case-insensitive). If exact is False, any name starting
        with the argument matches.
        """
        key = name.strip().lower()
        if exact:
            return list(self.index.get(key, []))
        matches = []
        for indexed_name in sorted(self.index.keys()):
            if indexed_name.startswith(key):
                matches.extend(self.index[indexed_name])
        return matches

    def names(self):
        """
        Return the set of place names (as spelled in the source).
        """
        return {location.name for locations in self.index.values()
                for location in locations}

    def size(self):
        return len(self.index)

    def __len__(self):
        return self.size()
