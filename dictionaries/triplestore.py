"""
TripleStore -- in-memory RDF store for linked-data dictionaries
"""

from rdflib import Graph, URIRef


class TripleStore(object):

    """
    Thin wrapper round an rdflib Graph.
    """

    def __init__(self):
        self.graph = Graph()

    def load_ntriples(self, data):
        """
        Add the triples from N-Triples data (bytes or str) to the store.
        """
        if isinstance(data, bytes):
            data = data.decode('utf-8')
        self.graph.parse(data=data, format='nt')

    def subjects_of(self, predicate):
        """
        Return the URIs of all subjects of the predicate, sorted.
        """
        return sorted({str(subject) for subject in
                       self.graph.subjects(URIRef(predicate), None)})

    def delete_objects(self, subject, predicate):
        """
        Remove all triples with the given subject and predicate;
        a subject of None matches any subject.
        """
        if subject is not None:
            subject = URIRef(subject)
        self.graph.remove((subject, URIRef(predicate), None))

    def size(self):
        return len(self.graph)

    def __len__(self):
        return self.size()
