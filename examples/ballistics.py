# examples/ballistics.py
# Fires one round of every shot type and reports where each one ends up.
# A round is retired once it hits the ground plane, flies past the range
# or has been alive for 5 seconds.
from impulse import Shot, Vector3, shot_particle
from impulse.logging_config import setup_logging

DT = 1 / 60
TIMEOUT = 5.0
FLOOR_Y = -5.0
RANGE_Z = 200.0

setup_logging()

launch = Vector3(0.0, 1.5, 0.0)

for shot in Shot:
    p = shot_particle(shot, launch)
    t = 0.0
    while t < TIMEOUT and p.position.y >= FLOOR_Y and p.position.z <= RANGE_Z:
        p.integrate(DT)
        t += DT
    print(f"{shot.name.lower():10s} t={t:5.2f}s  pos={p.position}  vel={p.velocity}")
