from scalargrad.engine import make_leaf, vtanh, square, backward

print("=== z = x * y + tanh(x) ===")
x = make_leaf(2.0)
y = make_leaf(3.0)
z = x * y + vtanh(x)
backward(z)
print(f"x.data = {x.data}, y.data = {y.data}")
print(f"z.data = {z.data:.4f}")
print(f"dz/dx = {x.grad:.4f}")
print(f"dz/dy = {y.grad:.4f}")

print()
print("=== fit y = 2x + 1 with gradient descent ===")
xs = [-1.0, 0.0, 1.0, 2.0, 3.0]
ys = [-1.0, 1.0, 3.0, 5.0, 7.0]
w = make_leaf(0.0)
b = make_leaf(0.0)
lr = 0.1
epochs = 50
for epoch in range(epochs):
    # fresh graph every epoch; summed squared error scaled to a mean
    loss = 0
    for xi, yi in zip(xs, ys):
        loss = loss + square(w * xi + b - yi)
    loss = loss * (1.0 / len(xs))
    backward(loss)
    w.data -= lr * w.grad
    b.data -= lr * b.grad
    print(f"...epoch {epoch:4d} loss {loss.data:.6f} w {w.data:.4f} b {b.data:.4f}")

print(f"w ~ {w.data:.4f} (target 2.0)")
print(f"b ~ {b.data:.4f} (target 1.0)")
