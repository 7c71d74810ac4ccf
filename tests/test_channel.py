import unittest
import sys
from pathlib import Path

# Add project root to sys.path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from emoji_picker.core.channel import MethodCall, MethodChannel, MethodResult
from emoji_picker.core.errors import ArgumentError

class TestMethodCall(unittest.TestCase):
    def test_argument_lookup(self):
        call = MethodCall("isAvailable", {"emoji": "x"})
        self.assertEqual(call.argument("emoji"), "x")
        self.assertEqual(call.argument("emoji", str), "x")

    def test_missing_argument(self):
        with self.assertRaises(ArgumentError) as ctx:
            MethodCall("isAvailable", {}).argument("emoji")
        self.assertEqual(ctx.exception.name, "emoji")
        self.assertIn("missing", str(ctx.exception))

    def test_none_argument_counts_as_missing(self):
        with self.assertRaises(ArgumentError):
            MethodCall("isAvailable", {"emoji": None}).argument("emoji")

    def test_no_arguments(self):
        with self.assertRaises(ArgumentError):
            MethodCall("isAvailable").argument("emoji")

    def test_wrong_type(self):
        with self.assertRaises(ArgumentError) as ctx:
            MethodCall("isAvailable", {"emoji": 5}).argument("emoji", str)
        self.assertIn("expected str, got int", str(ctx.exception))

    def test_arguments_not_a_mapping(self):
        with self.assertRaises(ArgumentError):
            MethodCall("isAvailable", ["emoji"]).argument("emoji")

    def test_argument_error_is_value_error(self):
        self.assertTrue(issubclass(ArgumentError, ValueError))

class TestMethodChannel(unittest.TestCase):
    def test_unbound_channel_is_not_implemented(self):
        channel = MethodChannel("test")
        result = channel.invoke("anything", {})
        self.assertEqual(result.status, MethodResult.NOT_IMPLEMENTED)
        self.assertFalse(result.ok)

    def test_dispatch_to_handler(self):
        channel = MethodChannel("test")
        channel.set_method_call_handler(lambda call: MethodResult.success(call.method))
        self.assertTrue(channel.has_handler)

        result = channel.invoke("ping")
        self.assertTrue(result.ok)
        self.assertEqual(result.value, "ping")

    def test_argument_error_becomes_error_result(self):
        channel = MethodChannel("test")
        channel.set_method_call_handler(lambda call: MethodResult.success(call.argument("emoji")))

        result = channel.invoke("isAvailable", {})
        self.assertEqual(result.status, MethodResult.ERROR)
        self.assertEqual(result.code, "bad_argument")
        self.assertIn("emoji", result.message)

    def test_other_errors_propagate(self):
        def handler(call):
            raise RuntimeError("defect")

        channel = MethodChannel("test")
        channel.set_method_call_handler(handler)
        with self.assertRaises(RuntimeError):
            channel.invoke("boom")

    def test_unbinding(self):
        channel = MethodChannel("test")
        channel.set_method_call_handler(lambda call: MethodResult.success(True))
        channel.set_method_call_handler(None)
        self.assertFalse(channel.has_handler)
        self.assertEqual(channel.invoke("x").status, MethodResult.NOT_IMPLEMENTED)

if __name__ == '__main__':
    unittest.main()
