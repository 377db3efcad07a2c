class VectorException(Exception):
    pass


class VectorSizeException(VectorException):
    pass


class DegenerateRayException(VectorException):
    pass


class Vec:
    """ Small n-dimensional vector used for points and ray directions """

    def __init__(self, *argv):
        self.elem = list(argv)
        self.nElem = len(self.elem)

    def __repr__(self):
        return 'Vec{}({})'.format(self.nElem, ', '.join([str(e) for e in self.elem]))

    def _check_size(self, v, operation):
        if self.nElem != v.nElem:
            raise VectorSizeException(
                'Vectors must contain the same number of elements in order to perform {}'.format(operation))

    def dot(self, v):
        """ Calculate the dot product of two vectors """
        self._check_size(v, 'a dot product')
        return sum([self.elem[i] * v.elem[i] for i in range(self.nElem)])

    def mag2(self):
        """ Calculate the squared magnitude of vector """
        return self.dot(self)

    def __sub__(self, o):
        self._check_size(o, 'a subtraction operation')
        return Vec(*[self.elem[i] - o.elem[i] for i in range(self.nElem)])

    def __eq__(self, o):
        if not isinstance(o, Vec):
            return NotImplemented
        return self.elem == o.elem

    def __hash__(self):
        return hash(tuple(self.elem))

    def __getitem__(self, i):
        return self.elem[i]

    def __len__(self):
        return len(self.elem)

    def __iter__(self):
        return iter(self.elem)
