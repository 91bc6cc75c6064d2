from phpayroll.auth.role_cache import RoleCache


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_returns_role_until_ttl_expires():
    clock = FakeClock()
    cache = RoleCache(ttl=300, clock=clock)
    cache.set(1, 'hr')

    clock.now += 299
    assert cache.get(1) == 'hr'

    clock.now += 1
    assert cache.get(1) is None
    assert len(cache) == 0


def test_unknown_user_is_a_miss():
    assert RoleCache().get(42) is None


def test_set_refreshes_entry():
    clock = FakeClock()
    cache = RoleCache(ttl=10, clock=clock)
    cache.set(1, 'employee')
    clock.now += 8
    cache.set(1, 'hr')
    clock.now += 8
    assert cache.get(1) == 'hr'


def test_invalidate_one_user():
    cache = RoleCache()
    cache.set(1, 'hr')
    cache.set(2, 'account_manager')
    cache.invalidate(1)
    assert cache.get(1) is None
    assert cache.get(2) == 'account_manager'
    cache.invalidate(99)
    assert len(cache) == 1


def test_invalidate_everything():
    cache = RoleCache()
    cache.set(1, 'hr')
    cache.set(2, 'admin')
    cache.invalidate()
    assert len(cache) == 0


def test_entry_dropped_while_expiring_is_a_miss():
    now = [1000.0]
    racing = []

    def clock():
        if racing:
            # another request invalidates the user mid-lookup
            cache.invalidate(1)
        return now[0]

    cache = RoleCache(ttl=10, clock=clock)
    cache.set(1, 'hr')
    now[0] += 10
    racing.append(True)
    assert cache.get(1) is None
    assert len(cache) == 0
