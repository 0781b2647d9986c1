from enum import Enum


class Language(str, Enum):
    spanish = "es"
    portuguese = "pt"
    indonesian = "id"
    french = "fr"
    arabic = "ar"
    turkish = "tr"
    thai = "th"
    vietnamese = "vi"
    german = "de"
    italian = "it"
    japanese = "ja"
    chinese_simplified = "zh-CN"
    chinese_traditional = "zh-TW"
    russian = "ru"
    korean = "ko"
    polish = "pl"
    dutch = "nl"
    romanian = "ro"
    hungarian = "hu"
    swedish = "sv"
    czech = "cs"
    hindi = "hi"
    bengali = "bn"
    danish = "da"
    farsi = "fa"
    filipino = "tl"
    finnish = "fi"
    hebrew = "iw"
    malay = "ms"
    norwegian = "no"
    ukrainian = "uk"
