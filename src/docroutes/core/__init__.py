"""Route derivation core."""
