import random
from scalargrad.engine import Value, square

class Module:

    def zero_grad(self):
        for p in self.parameters():
            p.grad = 0

    def parameters(self):
        return []


class Neuron(Module):

    def __init__(self, nin, nonlin=True):
        self.w = [Value(random.uniform(-1,1)) for _ in range(nin)]
        self.b = Value(0)
        self.nonlin = nonlin

    def __call__(self, x):
        assert len(self.w) == len(x), f"input of size {len(x)} with {len(self.w)} weights"
        act = self.b
        for wi, xi in zip(self.w, x):
            act = wi*xi + act
        return act.tanh() if self.nonlin else act

    def parameters(self):
        return self.w + [self.b]

class Layer(Module):

    def __init__(self, nin, nout, **kwargs):
        self.neurons = [Neuron(nin, **kwargs) for _ in range(nout)]

    def __call__(self, x):
        out = [n(x) for n in self.neurons]
        return out[0] if len(out) == 1 else out

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

class MLP(Module):

    def __init__(self, nin, nouts):
        sz = [nin] + nouts
        self.layers = [Layer(sz[i], sz[i+1], nonlin=i!=len(nouts)-1) for i in range(len(nouts))]

    def __call__(self, x):
        for layer in self.layers:
            # a single-output layer returns a bare Value
            x = layer(x if isinstance(x, list) else [x])
        return x

    def parameters(self):
        return [p for layer in self.layers for p in layer.parameters()]


def mse(predictions, targets):
    assert len(predictions) == len(targets), "predictions and targets differ in length"
    total = 0
    for pred, target in zip(predictions, targets):
        total = square(pred - target) + total
    return total * (1.0 / len(predictions))


def sgd_step(params, lr):
    for p in params:
        p.data -= lr * p.grad
