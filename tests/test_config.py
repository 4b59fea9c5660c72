import unittest

from notifysendall.config import Settings


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        settings = Settings.from_env({})
        self.assertEqual(settings.log_level, "WARNING")
        self.assertEqual(settings.client, "notify-send")
        self.assertEqual(settings.safe_path, "/usr/local/bin:/usr/bin:/bin")
        self.assertEqual(settings.runtime_dir, "/run/user")
        self.assertEqual(settings.sudo, "sudo")

    def test_environment_overrides(self):
        settings = Settings.from_env({
            "NOTIFY_SEND_ALL_LOG_LEVEL": "debug",
            "NOTIFY_SEND_ALL_CLIENT": "/usr/local/bin/notify-send",
            "NOTIFY_SEND_ALL_RUNTIME_DIR": "/var/run/user/",
            "NOTIFY_SEND_ALL_SUDO": "/usr/local/bin/sudo",
        })
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.client, "/usr/local/bin/notify-send")
        self.assertEqual(settings.runtime_dir, "/var/run/user")
        self.assertEqual(settings.sudo, "/usr/local/bin/sudo")

    def test_blank_values_fall_back(self):
        settings = Settings.from_env({"NOTIFY_SEND_ALL_CLIENT": "  ", "NOTIFY_SEND_ALL_SAFE_PATH": ""})
        self.assertEqual(settings.client, "notify-send")
        self.assertEqual(settings.safe_path, "/usr/local/bin:/usr/bin:/bin")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
