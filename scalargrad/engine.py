import math
import numbers

class Value:
    """ stores a single scalar value and its gradient """
    __slots__ = ("data", "grad", "_backward", "_prev", "_op")

    def __init__(self, data, _children=(), _op=''):
        self.data = data
        self.grad = 0
        # internal variables used for autograd graph construction
        self._backward = None
        self._prev = _children
        self._op = _op # the op that produced this node, for debugging

    @property
    def parents(self):
        return self._prev

    def __add__(self, other):
        other = _wrap(other)
        out = Value(self.data + other.data, (self, other), '+')

        def _backward():
            self.grad += out.grad
            other.grad += out.grad
        out._backward = _backward

        return out

    def __sub__(self, other):
        other = _wrap(other)
        out = Value(self.data - other.data, (self, other), '-')

        def _backward():
            self.grad += out.grad
            other.grad -= out.grad
        out._backward = _backward

        return out

    def __mul__(self, other):
        other = _wrap(other)
        out = Value(self.data * other.data, (self, other), '*')

        # self and other may be the same node (x * x); both lines must run
        def _backward():
            self.grad += other.data * out.grad
            other.grad += self.data * out.grad
        out._backward = _backward

        return out

    def tanh(self):
        out = Value(math.tanh(self.data), (self,), 'tanh')

        def _backward():
            self.grad += (1 - math.tanh(self.data)**2) * out.grad
        out._backward = _backward

        return out

    def topo(self):

        # topological order all of the children in the graph, depth first
        # without recursion; a frame is (node, index of next parent to visit)
        topo = []
        visited = {self}
        stack = [(self, 0)]
        while stack:
            v, i = stack.pop()
            if i < len(v._prev):
                stack.append((v, i + 1))
                child = v._prev[i]
                if child not in visited:
                    visited.add(child)
                    stack.append((child, 0))
            else:
                topo.append(v)
        return topo

    def backward(self):
        topo = self.topo()

        # every reachable node starts the pass at zero
        for v in topo:
            v.grad = 0

        # go one variable at a time and apply the chain rule to get its gradient
        self.grad = 1
        for v in reversed(topo):
            if v._backward is not None:
                v._backward()

    def __radd__(self, other): # other + self
        return _wrap(other) + self

    def __rsub__(self, other): # other - self
        return _wrap(other) - self

    def __rmul__(self, other): # other * self
        return _wrap(other) * self

    def __repr__(self):
        return f"Value(data={self.data}, grad={self.grad})"


def _wrap(x):
    # plain numbers become fresh leaves; their gradient is never read
    if isinstance(x, Value):
        return x
    assert isinstance(x, numbers.Real), f"cannot combine {type(x).__name__} with Value"
    return Value(x)


def make_leaf(x):
    return Value(x)


def add(a, b):
    return _wrap(a) + b


def sub(a, b):
    return _wrap(a) - b


def mul(a, b):
    return _wrap(a) * b


def vtanh(a):
    return a.tanh()


def square(a):
    return a * a


def topo_sort(out):
    return out.topo()


def backward(out):
    out.backward()
