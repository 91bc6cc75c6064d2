# phpayroll/auth/role_cache.py

import time


class RoleCache:
    """
    Per-application cache of user roles.

    Entries expire after `ttl` seconds and are dropped explicitly on logout,
    so a role change takes effect at the next sign-in at the latest.
    """

    def __init__(self, ttl=300, clock=time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries = {}

    def get(self, user_id):
        entry = self._entries.get(user_id)
        if entry is None:
            return None
        role, stored_at = entry
        if self._clock() - stored_at >= self.ttl:
            self._entries.pop(user_id, None)
            return None
        return role

    def set(self, user_id, role):
        self._entries[user_id] = (role, self._clock())

    def invalidate(self, user_id=None):
        """Drops one user's entry, or every entry when no user is given."""
        if user_id is None:
            self._entries.clear()
        else:
            self._entries.pop(user_id, None)

    def __len__(self):
        return len(self._entries)
