# Define a static color class for consistent use across the app


class Colors:
    # Primary / Neutral (Modern "Inter" Blue)
    blue = "#2563eb"  # Royal Blue, price line

    # Semantic: Gain (Emerald instead of "Grass Green")
    green = "#059669"  # Emerald 600 (Money color, good readability)

    # Semantic: Loss (Rose/Red instead of "Warning Sign Red")
    red = "#dc2626"  # Red 600 (Clear, but not glaring)

    gray = "#4b5563"  # Cool Gray, unchanged values


def change_color(value: float) -> str:
    """Gain, loss or neutral color for a signed change."""
    if value > 0:
        return Colors.green
    if value < 0:
        return Colors.red
    return Colors.gray
