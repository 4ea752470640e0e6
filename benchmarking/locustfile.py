"""Locust load testing script for QuickExit."""

import random

from locust import HttpUser, between, task

CATEGORIES = ["work", "family", "health", "transport"]
TONES = ["friendly", "urgent", "subtle"]


class QuickExitUser(HttpUser):
    """Simulated user tapping through the excuse screens."""

    wait_time = between(1, 3)  # Wait 1-3 seconds between tasks

    @task(4)
    def generate_excuse(self) -> None:
        """Generate an excuse for a random category and tone."""
        self.client.post(
            "/api/v1/excuses/generate",
            json={"category": random.choice(CATEGORIES), "tone": random.choice(TONES)},
        )

    @task(2)
    def fetch_recent_excuses(self) -> None:
        """Refresh the recent excuses list."""
        self.client.get("/api/v1/excuses/recent")

    @task(1)
    def fetch_recent_excuses_limited(self) -> None:
        """Fetch a short recent list, as the home screen does."""
        self.client.get(f"/api/v1/excuses/recent?limit={random.choice([3, 5])}")

    @task(1)
    def trigger_emergency(self) -> None:
        """Hit the panic button with a random call type."""
        self.client.post(
            "/api/v1/excuses/emergency",
            json={"callType": random.choice(["audio", "video"])},
        )
