from django.contrib.auth.hashers import BCryptSHA256PasswordHasher


class TaskTrackerBCryptPasswordHasher(BCryptSHA256PasswordHasher):
    # Passwords are prehashed with SHA256, so bcrypt's 72 byte limit never applies
    rounds = 8
