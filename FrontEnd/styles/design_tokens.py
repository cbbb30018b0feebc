# Design tokens for the Flow study tracker UI

# Series colors for stacked bars and pie slices, cycled by catalog index
GITHUB_BLUES = [
    '#0366d6',
    '#2188ff',
    '#79b8ff',
    '#c8e1ff',
    '#0a5ae1',
    '#044289',
    '#032f62',
    '#05264c',
]

THEMES = {
    'light': {
        'background': '#FFFFFF',
        'surface': '#FFFFFF',
        'border': '#D0D7DE',
        'text': '#111827',
        'text_muted': '#57606A',
        'input_bg': '#FFFFFF',
        'button_bg': '#FFFFFF',
        'button_hover': '#F3F4F6',
        'start_bg': '#16A34A',
        'pause_bg': '#DC2626',
        'day_idle': '#F3F4F6',
        'day_active': '#DCFCE7',
        'day_active_text': '#166534',
        'day_today': '#DBEAFE',
        'day_today_text': '#1E40AF',
        'bar_opacity': 1.0,
    },
    'dark': {
        'background': '#0D1117',
        'surface': '#161B22',
        'border': '#30363D',
        'text': '#FFFFFF',
        'text_muted': '#8B949E',
        'input_bg': '#0D1117',
        'button_bg': '#21262D',
        'button_hover': '#30363D',
        'start_bg': '#16A34A',
        'pause_bg': '#DC2626',
        'day_idle': '#1F2937',
        'day_active': '#14532D',
        'day_active_text': '#DCFCE7',
        'day_today': '#1E3A8A',
        'day_today_text': '#DBEAFE',
        'bar_opacity': 0.8,
    },
}

FONTS = {
    'family': 'Inter, Segoe UI, Arial, sans-serif',
    'timer_size': 64,
    'timer_weight': 300,
    'button_size': 16,
    'text': 14,
    'stat_size': 24,
}


def theme(dark):
    return THEMES['dark' if dark else 'light']


def stylesheet(dark):
    """Application-wide QSS for the chosen theme."""
    c = theme(dark)
    return f"""
        QWidget {{ background: {c['background']}; color: {c['text']}; font-family: {FONTS['family']}; font-size: {FONTS['text']}px; }}
        QWidget#Card {{ background: {c['surface']}; border: 1px solid {c['border']}; border-radius: 6px; }}
        QLabel#TimerLabel {{ font-size: {FONTS['timer_size']}px; font-weight: {FONTS['timer_weight']}; background: transparent; }}
        QLabel#Muted {{ color: {c['text_muted']}; background: transparent; }}
        QLabel#StatValue {{ font-size: {FONTS['stat_size']}px; font-weight: bold; background: transparent; }}
        QLineEdit, QComboBox {{ background: {c['input_bg']}; border: 1px solid {c['border']}; border-radius: 6px; padding: 4px 8px; }}
        QPushButton {{ background: {c['button_bg']}; border: 1px solid {c['border']}; border-radius: 6px; padding: 6px 12px; font-size: {FONTS['button_size']}px; }}
        QPushButton:hover {{ background: {c['button_hover']}; }}
        QPushButton#StartBtn {{ background: {c['start_bg']}; color: #FFFFFF; border: none; }}
        QPushButton#StartBtn[active="true"] {{ background: {c['pause_bg']}; }}
    """
