"""Curated language colors, tuned for dark backgrounds"""

LANGUAGE_COLORS = {
    "TypeScript": "#3178C6",
    "JavaScript": "#F7DF1E",
    "Python": "#3776AB",
    "Rust": "#DEA584",
    "Go": "#00ADD8",
    "Java": "#ED8B00",
    "Ruby": "#CC342D",
    "Swift": "#F05138",
    "Kotlin": "#7F52FF",
    "C": "#555555",
    "C++": "#F34B7D",
    "C#": "#239120",
    "PHP": "#777BB4",
    "Scala": "#DC322F",
    "Haskell": "#5E5086",
    "Elixir": "#6E4A7E",
    "Clojure": "#DB5855",
    "Dart": "#00B4AB",
    "Shell": "#89E051",
    "HTML": "#E34C26",
    "CSS": "#1572B6",
    "SCSS": "#CC6699",
    "Vue": "#4FC08D",
    "Svelte": "#FF3E00",
    "Other": "#6B7280",
}


def get_language_color(name: str, upstream_color: str = None) -> str:
    """Upstream color if GitHub provided one, else the curated color, else 'Other'"""
    if upstream_color:
        return upstream_color
    return LANGUAGE_COLORS.get(name, LANGUAGE_COLORS["Other"])
