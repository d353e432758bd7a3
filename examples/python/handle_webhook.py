#!/usr/bin/env python3
"""
Replay a saved GitHub webhook delivery through the auto-merge engine.

Environment:
    GITHUB_TOKEN: API token with permission to merge
    AUTOMERGER_APPROVED_LABEL: Label that marks a pull request as approved

Run with: python examples/python/handle_webhook.py status payload.json
"""

import json
import logging
import sys

from automerger import (
    AutoMergerError,
    BatchError,
    GitHubClient,
    RepoConfig,
    configure_logging,
    handle_event,
    parse_event,
)

if len(sys.argv) != 3:
    print(f"usage: {sys.argv[0]} <event-type> <payload.json>")
    sys.exit(2)

event_type, payload_path = sys.argv[1], sys.argv[2]

configure_logging(level=logging.INFO, engine_level=logging.DEBUG)

with open(payload_path, encoding="utf-8") as f:
    payload = json.load(f)

event = parse_event(event_type, payload)
if event is None:
    print(f"Ignoring unhandled event type: {event_type}")
    sys.exit(0)

config = RepoConfig.from_env()
if not config.enabled:
    print("AUTOMERGER_APPROVED_LABEL is not set; auto-merge is disabled")
    sys.exit(0)

print(f"Handling {event_type} event for {event.repo.full_name}...")

with GitHubClient.from_env() as client:
    try:
        handle_event(event, client, config)
    except BatchError as e:
        print(f"{len(e.errors)} pull request(s) failed:")
        for err in e.errors:
            print(f"   - {err}")
        sys.exit(1)
    except AutoMergerError as e:
        print(f"Failed: [{e.code}] {e.message}")
        sys.exit(1)

print("Done")
