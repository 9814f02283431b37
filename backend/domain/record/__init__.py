"""Record domain - logged meals, their items and PFC estimates."""
