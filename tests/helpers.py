from glyphtrail.particles import Particle


def make_particle(x=0.0, y=0.0, vx=0.0, vy=0.0, life=30.0, size=3.0, hue=0.0):
    return Particle(x, y, x, y, vx, vy, life, life, size, hue)
