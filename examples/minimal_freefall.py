# examples/minimal_freefall.py
from impulse import Particle, Vector3
from impulse.constants import STANDARD_GRAVITY

ball = Particle(
    position=Vector3(0.0, 10.0, 0.0),
    acceleration=Vector3(0.0, -STANDARD_GRAVITY, 0.0),
    damping=1.0,
    inverse_mass=1.0,
)

dt = 1 / 240
t = 0.0
t_end = 1.0
while t < t_end - 1e-12:
    ball.integrate(dt)
    t += dt

print("t:", t)
print("pos:", ball.position)
print("vel:", ball.velocity)
