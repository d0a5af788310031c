"""
src/simplifier/tables/emoji.py
===============================
Unified Emoji Table — Vaani Simplifier

One word/phrase → glyph table shared by every language. Keys in different
scripts never collide because matching is per whole word.
"""

from types import MappingProxyType


EMOJI_TABLE = MappingProxyType({
    # Emotions
    "happy": "😊", "sad": "😢", "angry": "😠", "laugh": "😂", "love": "❤️",
    "खुश": "😊", "दुखी": "😢", "गुस्सा": "😠", "हंसी": "😂", "प्यार": "❤️",
    "খুশি": "😊", "দুঃখিত": "😢", "রাগান্বিত": "😠", "হাসি": "😂", "ভালোবাসা": "❤️",
    "సంతోషం": "😊", "దుఃఖం": "😢", "కోపం": "😠", "నవ్వు": "😂", "ప్రేమ": "❤️",
    "खूश": "😊", "दुःखी": "😢", "राग": "😠", "हसणे": "😂", "प्रेम": "❤️",
    "સુખી": "😊", "દુઃખી": "😢", "ગુસ્સો": "😠", "હસવું": "😂", "પ્રેમ": "❤️",
    "மகிழ்ச்சி": "😊", "கோபம்": "😠", "அன்பு": "❤️",

    # Actions & places
    "food": "🍽️", "eat": "🍽️", "drink": "🥤", "home": "🏠", "work": "💼",
    "खाना": "🍽️", "पानी": "🥤", "घर": "🏠", "काम": "💼",
    "খাবার": "🍽️", "পান": "🥤", "বাড়ি": "🏠", "কাজ": "💼",
    "ఆహారం": "🍽️", "త్రాగు": "🥤", "ఇల్లు": "🏠", "పని": "💼",
    "જમવું": "🍽️", "પીવું": "🥤", "ઘર": "🏠", "કામ": "💼",
    "உணவு": "🍽️", "வீடு": "🏠", "வேலை": "💼",

    # Things
    "school": "🏫", "hospital": "🏥", "money": "💰", "phone": "📱",
    "स्कूल": "🏫", "अस्पताल": "🏥", "पैसा": "💰", "फोन": "📱",
    "স্কুল": "🏫", "হাসপাতাল": "🏥", "টাকা": "💰", "ফোন": "📱",
    "స్కూలు": "🏫", "ఆసుపత్రి": "🏥", "డబ్బు": "💰", "ఫోన్": "📱",
    "શાળા": "🏫", "હોસ્પિટલ": "🏥", "પૈસા": "💰", "ફોન": "📱",
    "பள்ளி": "🏫", "மருத்துவமனை": "🏥", "பணம்": "💰",

    # Time & weather
    "car": "🚗", "time": "⏰", "today": "📅", "tomorrow": "📅",
    "weather": "🌤️", "rain": "🌧️", "sun": "☀️", "night": "🌙", "morning": "🌅",
    "गाड़ी": "🚗", "समय": "⏰", "आज": "📅", "कल": "📅",
    "গাড়ি": "🚗", "সময়": "⏰", "আজ": "📅", "আগামীকাল": "📅",
    "కారు": "🚗", "సమయం": "⏰", "ఈరోజు": "📅", "రేపు": "📅",

    # Status
    "yes": "✅", "no": "❌", "good": "👍", "bad": "👎", "help": "🆘",
    "great": "⭐", "warning": "⚠️", "question": "❓",
    "हाँ": "✅", "नहीं": "❌", "अच्छा": "👍", "बुरा": "👎", "मदद": "🆘",
    "হ্যাঁ": "✅", "না": "❌", "ভালো": "👍", "খারাপ": "👎", "সাহায্য": "🆘",
    "అవును": "✅", "కాదు": "❌", "మంచి": "👍", "చెడు": "👎", "సహాయం": "🆘",

    # Greetings
    "hello": "👋", "hi": "👋", "bye": "👋", "goodbye": "👋",
    "thanks": "🙏", "thank": "🙏", "sorry": "🙏",
    "नमस्ते": "👋", "धन्यवाद": "🙏", "माफी": "🙏",
    "নমস্কার": "👋", "ধন্যবাদ": "🙏",
    "నమస్కారం": "👋", "ధన్యవాదాలు": "🙏",
    "வணக்கம்": "👋", "நன்றி": "🙏",
})
