"""Custom Discord emoji name → standard Unicode emoji.

Discord servers ship their own emoji (``<:name:id>``) that Telegram cannot
render. When a custom emoji's name matches one of these keys the standard
glyph is substituted; otherwise the emoji is dropped.

Keys are lowercase. Keys shorter than four characters only ever match
exactly, see ``references.resolve_emoji``.
"""

from types import MappingProxyType

_EMOJI = {
    # Hearts
    "heart": "❤️",
    "love": "❤️",
    "heartred": "❤️",
    "red_heart": "❤️",
    "heartorange": "🧡",
    "heartyellow": "💛",
    "heartgreen": "💚",
    "heartblue": "💙",
    "heartpurple": "💜",
    "heartblack": "🖤",
    "heartwhite": "🤍",
    "heartbreak": "💔",
    "broken_heart": "💔",
    "sparkling_heart": "💖",
    "hearteyes": "😍",
    "heart_eyes": "😍",

    # Fire and energy
    "fire": "🔥",
    "flame": "🔥",
    "burn": "🔥",
    "lit": "🔥",
    "zap": "⚡",
    "lightning": "⚡",
    "boom": "💥",
    "explosion": "💥",
    "rocket": "🚀",
    "hundred": "💯",
    "100": "💯",

    # Stars
    "star": "⭐",
    "stars": "⭐",
    "star2": "🌟",
    "glowing_star": "🌟",
    "sparkle": "✨",
    "sparkles": "✨",
    "dizzy": "💫",

    # Check marks
    "check": "✅",
    "tick": "✅",
    "checkmark": "✅",
    "yes": "✅",
    "correct": "✅",
    "done": "✅",
    "approved": "✅",
    "verified": "☑️",

    # Cross marks
    "cross": "❌",
    "x": "❌",
    "no": "❌",
    "wrong": "❌",
    "error": "❌",
    "denied": "❌",
    "cancel": "🚫",
    "forbidden": "🚫",

    # Emotions
    "laugh": "😂",
    "lol": "😂",
    "joy": "😂",
    "lmao": "🤣",
    "rofl": "🤣",
    "happy": "😊",
    "smile": "😊",
    "grin": "😁",
    "blush": "😊",
    "wink": "😉",
    "cool": "😎",
    "sunglasses": "😎",
    "sad": "😢",
    "cry": "😢",
    "sob": "😭",
    "angry": "😠",
    "mad": "😠",
    "rage": "😡",
    "thinking": "🤔",
    "think": "🤔",
    "hmm": "🤔",
    "shock": "😱",
    "scream": "😱",
    "surprised": "😮",
    "wow": "😮",
    "skull": "💀",
    "dead": "💀",
    "clown": "🤡",
    "nerd": "🤓",
    "sleep": "😴",
    "sleepy": "😴",
    "sweat": "😅",
    "shrug": "🤷",
    "facepalm": "🤦",
    "eyes": "👀",
    "pray": "🙏",
    "please": "🙏",
    "kiss": "😘",
    "pog": "😮",
    "pogchamp": "😮",

    # Hands and gestures
    "thumbsup": "👍",
    "thumbs_up": "👍",
    "like": "👍",
    "thumbsdown": "👎",
    "thumbs_down": "👎",
    "dislike": "👎",
    "clap": "👏",
    "wave": "👋",
    "hello": "👋",
    "point_right": "👉",
    "point_left": "👈",
    "point_up": "👆",
    "point_down": "👇",
    "ok_hand": "👌",
    "muscle": "💪",
    "strong": "💪",
    "handshake": "🤝",
    "raised_hands": "🙌",
    "fingers_crossed": "🤞",

    # Celebration
    "party": "🎉",
    "tada": "🎉",
    "celebrate": "🎉",
    "celebration": "🎉",
    "confetti": "🎊",
    "gift": "🎁",
    "present": "🎁",
    "trophy": "🏆",
    "winner": "🏆",
    "crown": "👑",
    "king": "👑",
    "medal": "🏅",
    "balloon": "🎈",
    "cake": "🎂",
    "birthday": "🎂",

    # Status and notices
    "warning": "⚠️",
    "warn": "⚠️",
    "alert": "🚨",
    "siren": "🚨",
    "info": "ℹ️",
    "information": "ℹ️",
    "question": "❓",
    "exclamation": "❗",
    "important": "❗",
    "bell": "🔔",
    "notification": "🔔",
    "announcement": "📢",
    "megaphone": "📣",
    "loudspeaker": "📢",
    "new": "🆕",
    "free": "🆓",
    "pin": "📌",
    "pushpin": "📌",
    "link": "🔗",
    "lock": "🔒",
    "unlock": "🔓",
    "key": "🔑",
    "shield": "🛡️",
    "stop": "🛑",
    "loading": "⏳",
    "hourglass": "⌛",
    "clock": "🕒",
    "time": "🕒",
    "calendar": "📅",

    # Tech and gaming
    "computer": "💻",
    "laptop": "💻",
    "desktop": "🖥️",
    "phone": "📱",
    "mobile": "📱",
    "game": "🎮",
    "gaming": "🎮",
    "controller": "🎮",
    "joystick": "🕹️",
    "robot": "🤖",
    "bot": "🤖",
    "bug": "🐛",
    "tools": "🛠️",
    "wrench": "🔧",
    "hammer": "🔨",
    "gear": "⚙️",
    "settings": "⚙️",
    "update": "🔄",
    "refresh": "🔄",
    "download": "📥",
    "upload": "📤",
    "search": "🔍",
    "chart": "📈",
    "stonks": "📈",
    "money": "💰",
    "cash": "💵",
    "coin": "🪙",
    "diamond": "💎",
    "gem": "💎",
    "target": "🎯",
    "dice": "🎲",
    "music": "🎵",
    "note": "📝",
    "memo": "📝",
    "book": "📖",
    "mail": "📧",
    "email": "📧",
    "package": "📦",
    "globe": "🌐",
    "world": "🌍",
    "earth": "🌍",

    # Nature and weather
    "sun": "☀️",
    "sunny": "☀️",
    "moon": "🌙",
    "rain": "🌧️",
    "snow": "❄️",
    "snowflake": "❄️",
    "rainbow": "🌈",
    "flower": "🌸",
    "rose": "🌹",
    "tree": "🌳",
    "leaf": "🍃",
    "clover": "🍀",
    "luck": "🍀",

    # Animals
    "cat": "🐱",
    "dog": "🐶",
    "fox": "🦊",
    "panda": "🐼",
    "unicorn": "🦄",
    "frog": "🐸",
    "pepe": "🐸",
    "monkey": "🐒",
    "snake": "🐍",
    "dragon": "🐉",
    "ghost": "👻",
    "alien": "👽",

    # Food and drink
    "pizza": "🍕",
    "burger": "🍔",
    "coffee": "☕",
    "beer": "🍺",
    "cheers": "🍻",
    "popcorn": "🍿",
    "cookie": "🍪",
}

EMOJI_TABLE = MappingProxyType(_EMOJI)
