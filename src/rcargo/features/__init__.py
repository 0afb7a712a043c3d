"""Feature packages implementing rcargo's behaviour."""
