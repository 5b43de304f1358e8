"""FitCoach web application package."""
