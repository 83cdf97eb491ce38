import random
from scalargrad.nn import MLP, mse, sgd_step
random.seed(4)
model = MLP(2, [5, 1])
batch = [([0, 0], 0), ([0, 1], 1), ([1, 0], 1), ([1, 1], 0)]
for epoch in range(1000):
    outputs = [model(xs) for xs, _ in batch]
    expected = [exp for _, exp in batch]
    loss = mse(outputs, expected)
    loss.backward()
    sgd_step(model.parameters(), 0.1)
    if epoch % 100 == 0:
        print(f"...epoch {epoch:4d} loss {loss.data:.4f}")


print("params", [p.data for p in model.parameters()])
for im in batch:
    result = model(im[0])
    print(f"{im[0]} -> {result.data:.4f} (expected {im[1]})")
