from flappy_face.bird import Bird
from flappy_face.config import CLASSIC


def test_update_does_nothing_outside_play():
    bird = Bird()
    bird.update(playing=False)
    assert (bird.y, bird.velocity, bird.rotation) == (240, 0, 0)


def test_gravity_and_fall_speed_clamp():
    bird = Bird()
    bird.update()
    assert bird.velocity == 0.5
    assert bird.y == 240.5
    for _ in range(50):
        bird.update()
        assert bird.velocity <= CLASSIC.max_fall_speed
    assert bird.velocity == CLASSIC.max_fall_speed


def test_jump_overwrites_velocity():
    bird = Bird()
    bird.velocity = 4.5
    bird.jump()
    assert bird.velocity == CLASSIC.jump_velocity
    bird.velocity = -3
    bird.jump()
    assert bird.velocity == CLASSIC.jump_velocity


def test_jump_ignored_outside_play():
    bird = Bird()
    bird.velocity = 2
    bird.jump(playing=False)
    assert bird.velocity == 2


def test_rotation_is_clamped():
    bird = Bird()
    bird.jump()
    bird.update()
    # -7.5 * 3 clamps to the nose-up limit
    assert bird.rotation == CLASSIC.rotation_min
    for _ in range(30):
        bird.update()
    assert bird.rotation == 15
    assert bird.x == CLASSIC.bird_x


def test_reset():
    bird = Bird()
    bird.y = 12
    bird.velocity = 5
    bird.rotation = 40
    bird.reset()
    assert (bird.x, bird.y, bird.velocity, bird.rotation) == (80, 240, 0, 0)


def test_hitbox_is_inset():
    bird = Bird()
    assert bird.hitbox() == (85, 245, 105, 265)
