"""Domain layer: digest value object, fingerprint encoder and exceptions."""
