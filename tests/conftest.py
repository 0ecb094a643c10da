"""Shared test setup: render off-screen."""

import matplotlib

matplotlib.use("Agg")
