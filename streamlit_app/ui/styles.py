"""
Global CSS Styling for Recipe Finder.

This module provides load_global_styles() to inject consistent styling
into the page. Focuses on typography, the card grid and the detail panel.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Finder app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Sets global styles for headings, buttons and cards
    - Styles recipe cards, label pills and the detail panel in warm orange tones
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        h1 {
            font-size: 2.75rem !important;
            margin-bottom: 0.5rem !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        /* Buttons - rounded pills */
        .stButton > button, .stFormSubmitButton > button {
            border-radius: 50px !important;
            box-shadow: 0 2px 6px rgba(234, 88, 12, 0.15) !important;
            transition: all 0.3s ease !important;
            font-weight: 600 !important;
        }

        .stButton > button:hover, .stFormSubmitButton > button:hover {
            box-shadow: 0 3px 10px rgba(234, 88, 12, 0.25) !important;
            transform: translateY(-1px) !important;
        }

        /* Page header */
        .rf-page-header {
            padding: 2rem 1.5rem !important;
            margin-bottom: 1.5rem !important;
            border-radius: 20px !important;
            background: linear-gradient(90deg, #f97316 0%, #ef4444 50%, #ec4899 100%) !important;
            color: #ffffff !important;
            text-align: center !important;
        }

        .rf-page-header .subtitle {
            font-size: 1.1rem !important;
            opacity: 0.9 !important;
        }

        /* Recipe card */
        .rf-card-title {
            font-size: 1.15rem !important;
            font-weight: 700 !important;
            color: #1f2937 !important;
            margin: 0.5rem 0 0.25rem 0 !important;
        }

        .rf-card-meta {
            color: #4b5563 !important;
            font-size: 0.9rem !important;
        }

        /* Label pills */
        .pill-tag {
            display: inline-block;
            padding: 0.2rem 0.7rem;
            border-radius: 50px;
            background: #dcfce7;
            color: #166534;
            font-size: 0.75rem;
            font-weight: 600;
            margin: 0 0.25rem 0.25rem 0;
        }

        .pill-tag--health {
            background: #dbeafe;
            color: #1e40af;
        }

        .pill-tag--muted {
            background: #f3f4f6;
            color: #4b5563;
        }

        /* Footer */
        .rf-footer {
            margin-top: 2.5rem !important;
            padding: 1.5rem 0 !important;
            border-radius: 16px !important;
            background: #1f2937 !important;
            color: #d1d5db !important;
            text-align: center !important;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
