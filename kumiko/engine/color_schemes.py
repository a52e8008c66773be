"""Named color schemes.

Each palette holds 8 colors: ``palette[0]`` is the background and
``palette[1:]`` are the seven line colors (red, green, yellow, blue, magenta,
cyan, foreground in the usual terminal order).
"""

from __future__ import annotations

from dataclasses import dataclass

from kumiko.errors import UnknownColorSchemeError


@dataclass(frozen=True)
class ColorScheme:
    name: str
    palette: tuple[str, str, str, str, str, str, str, str]

    @property
    def key(self) -> str:
        return normalize_scheme_key(self.name)

    @property
    def background(self) -> str:
        return self.palette[0]

    @property
    def line_colors(self) -> tuple[str, ...]:
        return self.palette[1:]


def normalize_scheme_key(name: str) -> str:
    """``"Rose Pine_Moon"`` → ``"rose-pine-moon"``."""
    return "-".join(name.strip().lower().replace("_", " ").split())


COLOR_SCHEMES: tuple[ColorScheme, ...] = (
    ColorScheme("Default", ("#2d2d2d", "#b5524a", "#5ea85e", "#c8a64e", "#737d8e", "#a87a96", "#5a8a8e", "#d5d5d5")),
    ColorScheme("Dracula", ("#282a36", "#ff5555", "#50fa7b", "#f1fa8c", "#bd93f9", "#ff79c6", "#8be9fd", "#f8f8f2")),
    ColorScheme("Nord", ("#2e3440", "#bf616a", "#a3be8c", "#ebcb8b", "#81a1c1", "#b48ead", "#88c0d0", "#e5e9f0")),
    ColorScheme("Catppuccin Mocha", ("#1e1e2e", "#f38ba8", "#a6e3a1", "#f9e2af", "#89b4fa", "#f5c2e7", "#94e2d5", "#cdd6f4")),
    ColorScheme("Catppuccin Macchiato", ("#24273a", "#ed8796", "#a6da95", "#eed49f", "#8aadf4", "#f5bde6", "#8bd5ca", "#cad3f5")),
    ColorScheme("Catppuccin Frappe", ("#303446", "#e78284", "#a6d189", "#e5c890", "#8caaee", "#f4b8e4", "#81c8be", "#c6d0f5")),
    ColorScheme("Catppuccin Latte", ("#eff1f5", "#d20f39", "#40a02b", "#df8e1d", "#1e66f5", "#ea76cb", "#179299", "#4c4f69")),
    ColorScheme("TokyoNight", ("#1a1b26", "#f7768e", "#9ece6a", "#e0af68", "#7aa2f7", "#bb9af7", "#7dcfff", "#c0caf5")),
    ColorScheme("TokyoNight Storm", ("#24283b", "#f7768e", "#9ece6a", "#e0af68", "#7aa2f7", "#bb9af7", "#7dcfff", "#c0caf5")),
    ColorScheme("TokyoNight Day", ("#e1e2e7", "#f52a65", "#587539", "#8c6c3e", "#2e7de9", "#9854f1", "#007197", "#3760bf")),
    ColorScheme("Gruvbox Dark", ("#282828", "#cc241d", "#98971a", "#d79921", "#458588", "#b16286", "#689d6a", "#ebdbb2")),
    ColorScheme("Gruvbox Light", ("#fbf1c7", "#cc241d", "#98971a", "#d79921", "#458588", "#b16286", "#689d6a", "#3c3836")),
    ColorScheme("Solarized Dark", ("#002b36", "#dc322f", "#859900", "#b58900", "#268bd2", "#d33682", "#2aa198", "#eee8d5")),
    ColorScheme("Solarized Light", ("#fdf6e3", "#dc322f", "#859900", "#b58900", "#268bd2", "#d33682", "#2aa198", "#073642")),
    ColorScheme("One Dark", ("#282c34", "#e06c75", "#98c379", "#e5c07b", "#61afef", "#c678dd", "#56b6c2", "#abb2bf")),
    ColorScheme("One Light", ("#fafafa", "#e45649", "#50a14f", "#c18401", "#4078f2", "#a626a4", "#0184bc", "#383a42")),
    ColorScheme("Monokai", ("#272822", "#f92672", "#a6e22e", "#f4bf75", "#66d9ef", "#ae81ff", "#a1efe4", "#f8f8f2")),
    ColorScheme("Monokai Pro", ("#2d2a2e", "#ff6188", "#a9dc76", "#ffd866", "#fc9867", "#ab9df2", "#78dce8", "#fcfcfa")),
    ColorScheme("Rose Pine", ("#191724", "#eb6f92", "#31748f", "#f6c177", "#9ccfd8", "#c4a7e7", "#ebbcba", "#e0def4")),
    ColorScheme("Rose Pine Moon", ("#232136", "#eb6f92", "#3e8fb0", "#f6c177", "#9ccfd8", "#c4a7e7", "#ea9a97", "#e0def4")),
    ColorScheme("Rose Pine Dawn", ("#faf4ed", "#b4637a", "#286983", "#ea9d34", "#56949f", "#907aa9", "#d7827e", "#575279")),
    ColorScheme("Everforest", ("#2d353b", "#e67e80", "#a7c080", "#dbbc7f", "#7fbbb3", "#d699b6", "#83c092", "#d3c6aa")),
    ColorScheme("Kanagawa", ("#1f1f28", "#c34043", "#76946a", "#c0a36e", "#7e9cd8", "#957fb8", "#6a9589", "#dcd7ba")),
    ColorScheme("Ayu Dark", ("#0b0e14", "#f07178", "#aad94c", "#ffb454", "#59c2ff", "#d2a6ff", "#95e6cb", "#bfbdb6")),
    ColorScheme("Ayu Mirage", ("#1f2430", "#f28779", "#d5ff80", "#ffd173", "#73d0ff", "#dfbfff", "#95e6cb", "#cccac2")),
    ColorScheme("Ayu Light", ("#fcfcfc", "#f07171", "#86b300", "#f2ae49", "#399ee6", "#a37acc", "#4cbf99", "#5c6166")),
    ColorScheme("Nightfox", ("#192330", "#c94f6d", "#81b29a", "#dbc074", "#719cd6", "#9d79d6", "#63cdcf", "#cdcecf")),
    ColorScheme("Material", ("#263238", "#f07178", "#c3e88d", "#ffcb6b", "#82aaff", "#c792ea", "#89ddff", "#eeffff")),
    ColorScheme("Palenight", ("#292d3e", "#f07178", "#c3e88d", "#ffcb6b", "#82aaff", "#c792ea", "#89ddff", "#a6accd")),
    ColorScheme("Night Owl", ("#011627", "#ef5350", "#22da6e", "#addb67", "#82aaff", "#c792ea", "#21c7a8", "#d6deeb")),
    ColorScheme("Oceanic Next", ("#1b2b34", "#ec5f67", "#99c794", "#fac863", "#6699cc", "#c594c5", "#5fb3b3", "#d8dee9")),
    ColorScheme("Tomorrow Night", ("#1d1f21", "#cc6666", "#b5bd68", "#f0c674", "#81a2be", "#b294bb", "#8abeb7", "#c5c8c6")),
    ColorScheme("Horizon", ("#1c1e26", "#e95678", "#29d398", "#fab795", "#26bbd9", "#ee64ac", "#59e1e3", "#d5d8da")),
    ColorScheme("Sumi", ("#f2ede4", "#9e3b2f", "#4d6b3c", "#b08a3e", "#3b4f6b", "#6d4a63", "#3f6e6a", "#2b2a28")),
)

color_schemes_by_key: dict[str, ColorScheme] = {scheme.key: scheme for scheme in COLOR_SCHEMES}


def get_color_scheme_names() -> list[str]:
    return [scheme.name for scheme in COLOR_SCHEMES]


def get_color_scheme(name: str) -> ColorScheme:
    """Look up a scheme by display name or key, ignoring case, spaces and underscores."""
    scheme = color_schemes_by_key.get(normalize_scheme_key(name))
    if scheme is None:
        raise UnknownColorSchemeError(name)
    return scheme
