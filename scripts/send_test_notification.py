"""Request a notification for a user through the send-notification function."""

from __future__ import annotations

import argparse
import asyncio
import json

from ajoconnect.application.use_cases.notifications import send_notification
from ajoconnect.domain.entities import NotificationType


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("user_id")
    parser.add_argument(
        "--type",
        dest="notification_type",
        choices=[member.value for member in NotificationType],
        default=NotificationType.PAYMENT_SUCCESS.value,
    )
    parser.add_argument("--title", default="Test notification")
    parser.add_argument("--message", default="This is a test notification.")
    parser.add_argument("--url", default=None, help="Route opened when the push is clicked")
    parser.add_argument("--no-email", action="store_true")
    parser.add_argument("--no-push", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    result = asyncio.run(
        send_notification(
            user_id=args.user_id,
            notification_type=args.notification_type,
            title=args.title,
            message=args.message,
            data={"url": args.url} if args.url else None,
            send_email=not args.no_email,
            send_push=not args.no_push,
        )
    )
    print(json.dumps(result.to_dict(), indent=2))
    if not result.success:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
