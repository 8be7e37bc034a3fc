"""Example: drive the user lifecycle service directly (no transport layer)."""

from src.ticketing.ticketing.main import create_container


def main():
    container = create_container()
    for user in container.user_service.list_all_by_role("Manager"):
        print(user.user_name, user.first_name, user.last_name)


if __name__ == "__main__":
    main()
