"""
OverarchingLocation -- aggregates several gazetteer backends
"""


class OverarchingLocation(object):

    """
    Gazetteer backends registered by nickname; queries run over all
    of them.
    """

    def __init__(self):
        self.services = {}

    def activate_localization(self, nickname, service):
        self.services[nickname] = service

    def deactivate_localization(self, nickname):
        self.services.pop(nickname, None)

    def nicknames(self):
        return sorted(self.services.keys())

    def find(self, name, exact=True):
        locations = []
        for nickname in self.nicknames():
            locations.extend(self.services[nickname].find(name, exact=exact))
        return locations

    def names(self):
        names = set()
        for service in self.services.values():
            names.update(service.names())
        return names

    def size(self):
        return sum(service.size() for service in self.services.values())

    def __len__(self):
        return self.size()
