from src.ticketing.ticketing.users.deletion_policy import DeletionPolicy
from src.ticketing.ticketing.users.model import Role, User


class CountingLookup:
    def __init__(self, count: int):
        self.count = count
        self.seen = []

    def count_live_projects_managed_by(self, user):
        self.seen.append(user)
        return self.count

    def count_live_tasks_assigned_to(self, user):
        self.seen.append(user)
        return self.count


def _user(description: str) -> User:
    return User(
        user_id=1,
        first_name="A",
        last_name="B",
        user_name="a",
        password_hash="x",
        role=Role(role_id=None, description=description),
    )


def test_manager_checks_projects_only():
    projects, tasks = CountingLookup(0), CountingLookup(9)
    policy = DeletionPolicy(projects=projects, tasks=tasks)

    assert policy.can_delete(_user("Manager")) is True
    assert len(projects.seen) == 1
    assert tasks.seen == []


def test_manager_with_projects_is_blocked():
    policy = DeletionPolicy(projects=CountingLookup(1), tasks=CountingLookup(0))

    assert policy.can_delete(_user("Manager")) is False


def test_employee_checks_tasks_only():
    projects, tasks = CountingLookup(9), CountingLookup(2)
    policy = DeletionPolicy(projects=projects, tasks=tasks)

    assert policy.can_delete(_user("Employee")) is False
    assert projects.seen == []


def test_unknown_role_defaults_to_deletable_without_lookups():
    projects, tasks = CountingLookup(5), CountingLookup(5)
    policy = DeletionPolicy(projects=projects, tasks=tasks)

    assert policy.can_delete(_user("Auditor")) is True
    assert policy.can_delete(_user("Admin")) is True
    assert projects.seen == [] and tasks.seen == []
