"""Common values for the `gl` (country) and `hl` (language) request fields."""

# Country codes (gl)
GL_UNITED_STATES = "us"
GL_UNITED_KINGDOM = "uk"
GL_CANADA = "ca"
GL_GERMANY = "de"
GL_FRANCE = "fr"
GL_JAPAN = "jp"
GL_AUSTRALIA = "au"
GL_BRAZIL = "br"
GL_INDIA = "in"
GL_CHINA = "cn"

# Language codes (hl)
HL_ENGLISH = "en"
HL_SPANISH = "es"
HL_FRENCH = "fr"
HL_GERMAN = "de"
HL_ITALIAN = "it"
HL_JAPANESE = "ja"
HL_KOREAN = "ko"
HL_CHINESE = "zh-cn"
HL_PORTUGUESE = "pt"
HL_RUSSIAN = "ru"
