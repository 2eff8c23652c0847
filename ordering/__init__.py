"""Order aggregate consistency core."""
