"""
Microbenchmark: time per simulation tick vs number of particles.
Run:
  python benchmarks/bench_integrate.py
"""
import time
import numpy as np
from impulse import Particle, Vector, Vector3
from impulse.constants import DEFAULT_DAMPING, STANDARD_GRAVITY

def run(n: int, steps: int = 300):
    rng = np.random.default_rng(12345)  # determinism
    gravity = Vector3(0.0, -STANDARD_GRAVITY, 0.0)
    particles = [
        Particle(
            velocity=Vector.from_iterable(rng.uniform(-10.0, 10.0, 3)),
            acceleration=gravity,
            damping=DEFAULT_DAMPING,
            inverse_mass=1.0,
        )
        for _ in range(n)
    ]

    # warmup
    for _ in range(30):
        for p in particles:
            p.integrate(1 / 240)

    t0 = time.perf_counter()
    for _ in range(steps):
        for p in particles:
            p.integrate(1 / 240)
    t1 = time.perf_counter()

    return (t1 - t0) / steps

if __name__ == "__main__":
    for n in [10, 100, 1000, 5000]:
        per_step = run(n)
        print(f"N={n:5d}  tick={1e3*per_step:8.3f} ms  per particle={1e6*per_step/n:7.2f} us")
