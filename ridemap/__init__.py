"""Terminal ride-share simulation that matches customers with drivers on a city grid map."""

__version__ = "0.1.0"
__all__ = ["location", "sorted_list", "view", "users", "rideshare", "controller"]