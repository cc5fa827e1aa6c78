"""Promote an existing user to the admin role.

Usage: python scripts/make_admin.py <username>

Sessions opened before the change keep the old role until the user logs in again.
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blogapp import create_app
from blogapp.services import find_user_by_name, set_role


def main(argv):
    if len(argv) != 2:
        print(__doc__)
        return 2

    app = create_app()
    with app.app_context():
        user = find_user_by_name(argv[1])
        if user is None:
            print(f"No such user: {argv[1]}")
            return 1
        set_role(user, 'admin')
        print(f"{user.username} promoted to admin")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
