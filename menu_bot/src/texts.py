HELLO = "Welcome! Send me a link or a message."

HELP_TEXT = (
    "<b>Commands</b>\n\n"
    "<code>/start</code> – main menu\n"
    "<code>/help</code> – this text\n"
    "<code>/cancel</code> – abort the current operation\n"
)

FORMAT_TEXT = (
    "h265: best quality, but may not work on some devices.\n"
    "h264: worse quality, but works on many devices.\n"
    "audio: audio only"
)

ADMINS_ONLY = "This option is for admins only."
BACK_TO_MENU = "Returning to main menu..."
CANCELLED = "Operation cancelled."

ASK_BROADCAST = "📢 Send broadcast message (HTML supported).\n/cancel to abort."
BROADCAST_CONFIRM = "Send this message to all users?"
BROADCAST_TEXT_ONLY = "Only text messages can be broadcast. Send text or /cancel."

REQUEST_ACCEPTED = "✅ Got it! Request #{req_id} received."
REQUEST_EMPTY = "Send me a link or a text message."
