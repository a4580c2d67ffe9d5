# Design tokens for Tempo UI

COLORS = {
    'background': '#F7F9FC',
    'surface': '#FFFFFF',
    'text': '#3C4450',
    'text_muted': '#8A94A3',
    'text_strong': '#133A62',
    'border': '#DCE3ED',
    'sidebar_bg': '#F7F9FC',
    'sidebar_active_bg': '#FDECEA',
    'footer_bg': '#FDECEA',
    'footer_text': '#7A2E26',
    'chart_bar': '#E8786A',
    'chart_edge': '#C95F52',
    'insight_best': '#F2B705',
    'insight_average': '#3BA55C',
    'insight_streak': '#F28C28',
}

# accent colour per timer mode
MODE_COLORS = {
    'focus': '#E8554E',
    'short_break': '#3BA58B',
    'long_break': '#4C7BD9',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 96,
    'timer_weight': 'bold',
    'button_size': 18,
    'button_weight': 600,
    'sidebar_size': 16,
    'text': 16,
    'text_strong': 22,
}


def stylesheet(accent):
    """Application QSS built from the tokens and the current mode accent."""
    return f"""
    QMainWindow, QWidget {{ background: {COLORS['background']}; color: {COLORS['text']};
        font-family: {FONTS['family']}; font-size: {FONTS['text']}px; }}
    QListWidget {{ background: {COLORS['sidebar_bg']}; border: none; font-size: {FONTS['sidebar_size']}px; }}
    QListWidget::item {{ padding: 12px 0 12px 24px; }}
    QListWidget::item:selected {{ background: {COLORS['sidebar_active_bg']}; color: {COLORS['text_strong']};
        border-left: 4px solid {accent}; }}
    QLabel#ModeLabel {{ color: {accent}; font-size: {FONTS['text_strong']}px; font-weight: 600; }}
    QLabel#TimerLabel {{ color: {COLORS['text_strong']}; font-size: {FONTS['timer_size']}px;
        font-weight: {FONTS['timer_weight']}; }}
    QLabel#CycleLabel {{ color: {accent}; font-size: 20px; letter-spacing: 6px; }}
    QPushButton {{ border-radius: 12px; padding: 12px 28px; font-size: {FONTS['button_size']}px;
        font-weight: {FONTS['button_weight']}; }}
    QPushButton#StartBtn {{ background: {accent}; color: white; border: none; }}
    QPushButton#SecondaryBtn {{ background: {COLORS['surface']}; border: 1px solid {COLORS['border']}; }}
    QPushButton#DangerBtn {{ background: {COLORS['surface']}; color: {MODE_COLORS['focus']};
        border: 1px solid {MODE_COLORS['focus']}; }}
    QWidget#Card {{ background: {COLORS['surface']}; border: 1px solid {COLORS['border']}; border-radius: 16px; }}
    QLabel#CardTitle {{ color: {COLORS['text_muted']}; font-size: 14px; }}
    QLabel#CardValue {{ color: {COLORS['text_strong']}; font-size: 32px; font-weight: bold; }}
    """
