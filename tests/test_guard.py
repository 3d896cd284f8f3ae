from guard import ActivityGuard, ActivityState


def test_acquire_release_cycle():
    guard = ActivityGuard("test")
    assert guard.state is ActivityState.IDLE

    assert guard.try_acquire() is True
    assert guard.active
    assert guard.try_acquire() is False
    assert guard.active

    guard.release()
    assert guard.state is ActivityState.IDLE
    assert guard.try_acquire() is True


def test_release_while_idle_is_harmless():
    guard = ActivityGuard("test")
    guard.release()
    assert guard.state is ActivityState.IDLE
