"""Embedded stylesheet for emitted decks.

Layout rules are shared by every theme and reference CSS custom
properties only; ``theme_tokens`` fills those properties in from a
ThemeDescriptor and the deck's accent color.
"""

from htmldecks.schemas.theme_schema import ThemeDescriptor

BASE_CSS = """
*, *::before, *::after { box-sizing: border-box; margin: 0; padding: 0; }

html { scroll-snap-type: y mandatory; scroll-behavior: smooth; overflow-x: hidden; }
body {
  font-family: var(--font-body);
  background: var(--bg);
  color: var(--text);
  -webkit-font-smoothing: antialiased;
}

h1, h2, .slide__number, .slide__number-large, .slide__stat-number, .slide-counter {
  font-family: var(--font-heading);
}

/* === Slides === */
.slide {
  min-height: 100vh;
  display: flex;
  align-items: center;
  justify-content: center;
  scroll-snap-align: start;
  position: relative;
  padding: 60px 80px;
}
.slide__content { max-width: 1200px; width: 100%; }
.animate .slide__content {
  opacity: 0;
  transform: translateY(20px);
  animation: slideIn 0.5s ease-out forwards;
}
.slide h2 {
  font-size: clamp(2rem, 4.5vw, 3.5rem);
  line-height: 1.1;
  letter-spacing: -0.02em;
  margin-bottom: 40px;
}

/* === Title === */
.slide__number-large { font-size: 8rem; font-weight: 900; color: var(--border); line-height: 1; }
.slide--title h1 {
  font-size: clamp(3rem, 7vw, 5rem);
  line-height: 0.95;
  letter-spacing: -0.03em;
  margin-bottom: 32px;
}
.slide__subtitle { font-size: clamp(1.2rem, 2.5vw, 1.6rem); color: var(--text-muted); margin-bottom: 32px; }
.slide__badge {
  display: inline-block;
  background: var(--primary);
  color: var(--bg);
  padding: 10px 20px;
  font-size: 0.9rem;
  text-transform: uppercase;
  letter-spacing: 0.1em;
  margin-bottom: 32px;
}
.slide__accent-bar { width: 80px; height: 4px; background: var(--accent); margin-bottom: 24px; }
.slide__meta { color: var(--text-muted); text-transform: uppercase; letter-spacing: 0.1em; }

/* === Header === */
.slide__header { display: flex; align-items: center; gap: 24px; margin-bottom: 48px; }
.slide__number { font-size: 1.2rem; font-weight: 900; }
.accent-element { width: 60px; height: 4px; background: var(--accent); }

/* === Bullets === */
.slide__bullets { list-style: none; font-size: clamp(1rem, 2vw, 1.2rem); line-height: 1.7; }
.slide__bullets li { display: flex; gap: 20px; padding: 16px 0; border-bottom: 1px solid var(--border); }
.slide__bullets li:last-child { border-bottom: none; }
.bullet-number { font-weight: 900; color: var(--primary); flex-shrink: 0; width: 32px; }

/* === Two Column === */
.slide__two-column { display: grid; grid-template-columns: 1fr 1fr; gap: 48px; align-items: start; }

/* === Stats === */
.slide__stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 32px; }
.slide__stat {
  padding: 32px;
  background: var(--surface);
  border: 1px solid var(--border);
  opacity: 0;
  animation: statReveal 0.6s ease forwards;
  animation-delay: var(--delay, 0s);
}
.slide__stat-number { font-size: clamp(2.5rem, 5vw, 4rem); color: var(--accent); line-height: 1; margin-bottom: 8px; }
.slide__stat-label { font-size: 0.9rem; color: var(--text-muted); text-transform: uppercase; letter-spacing: 0.1em; }

/* === Quote === */
.quote-container { position: relative; padding: 48px 0; }
.quote-mark {
  position: absolute;
  top: -60px;
  left: -20px;
  font-size: 10rem;
  line-height: 1;
  color: var(--border);
  z-index: -1;
}
.slide__quote { font-family: var(--font-heading); font-size: clamp(1.5rem, 3.5vw, 2.5rem); line-height: 1.3; margin-bottom: 32px; }
.slide__attribution { font-style: normal; color: var(--text-muted); text-transform: uppercase; letter-spacing: 0.05em; }

/* === Table === */
.table-container { border: 1px solid var(--border); overflow-x: auto; }
.slide__table { width: 100%; border-collapse: collapse; }
.slide__table th, .slide__table td { padding: 20px; text-align: left; border-bottom: 1px solid var(--border); }
.slide__table th { background: var(--surface); font-family: var(--font-heading); text-transform: uppercase; font-size: 0.85rem; letter-spacing: 0.08em; }

/* === Charts === */
.slide__chart { display: flex; justify-content: center; align-items: center; }
.slide__chart svg { max-width: 100%; height: auto; }
.chart-placeholder {
  padding: 60px;
  text-align: center;
  color: var(--text-muted);
  background: var(--surface);
  border: 1px dashed var(--border);
}

/* === Image + Text === */
.slide__image-text { display: grid; gap: 40px; align-items: center; }
.slide__image-text--left { grid-template-columns: 1fr 1.2fr; }
.slide__image-text--right { grid-template-columns: 1.2fr 1fr; }
.slide__image-text--right .slide__image { order: 2; }
.slide__image { border: 1px solid var(--border); overflow: hidden; min-height: 120px; background: var(--surface); }
.slide__image img { width: 100%; height: auto; display: block; }
.slide__text p { font-size: clamp(1rem, 2vw, 1.2rem); line-height: 1.7; margin-bottom: 20px; }

/* === Navigation === */
.progress {
  position: fixed;
  top: 0;
  left: 0;
  height: 4px;
  width: 0;
  background: var(--accent);
  z-index: 100;
  transition: width 0.4s linear;
}
.nav-dots {
  position: fixed;
  right: 32px;
  top: 50%;
  transform: translateY(-50%);
  display: flex;
  flex-direction: column;
  gap: 12px;
  z-index: 100;
}
.nav-dot {
  width: 12px;
  height: 12px;
  padding: 0;
  border: none;
  border-radius: 50%;
  background: var(--border);
  cursor: pointer;
  transition: all 0.3s ease;
}
.nav-dot--active { background: var(--accent); transform: scale(1.3); }
.slide-counter { position: fixed; bottom: 32px; right: 32px; font-size: 0.9rem; color: var(--text-muted); z-index: 100; }

.watermark {
  position: fixed;
  bottom: 16px;
  left: 16px;
  z-index: 9999;
  font-size: 10px;
  color: var(--text-muted);
  pointer-events: none;
}
.watermark a { color: inherit; text-decoration: none; pointer-events: auto; }

@keyframes slideIn { to { opacity: 1; transform: none; } }
@keyframes statReveal { to { opacity: 1; } }

@media (prefers-reduced-motion: reduce) {
  *, *::before, *::after {
    animation-duration: 0.01ms !important;
    animation-iteration-count: 1 !important;
    transition-duration: 0.01ms !important;
  }
}

@media print {
  html { scroll-snap-type: none; }
  .slide { min-height: auto; page-break-after: always; break-inside: avoid; padding: 40px; }
  .progress, .nav-dots, .slide-counter, .watermark { display: none; }
  .slide__content, .slide__stat { opacity: 1; transform: none; animation: none; }
}

@media (max-width: 768px) {
  .slide { padding: 40px 24px; }
  .slide__two-column, .slide__stats, .slide__image-text,
  .slide__image-text--left, .slide__image-text--right { grid-template-columns: 1fr; gap: 24px; }
  .slide__image-text--right .slide__image { order: 0; }
  .nav-dots { right: 16px; gap: 8px; }
  .nav-dot { width: 10px; height: 10px; }
}
"""


def theme_tokens(theme: ThemeDescriptor, accent: str) -> str:
    """Return the :root block of custom properties for a theme and accent."""
    tokens = {
        "--accent": accent,
        "--primary": theme.primary_resolved(accent),
        "--bg": theme.colors.background,
        "--text": theme.colors.text,
        "--text-muted": theme.colors.text_muted,
        "--surface": theme.surface_resolved,
        "--border": theme.border_resolved,
        "--font-heading": theme.fonts.heading_stack,
        "--font-body": theme.fonts.body_stack,
    }
    lines = "\n".join(f"  {name}: {value};" for name, value in tokens.items())
    return f":root {{\n{lines}\n}}\n"


def stylesheet(theme: ThemeDescriptor, accent: str) -> str:
    """Complete CSS for one document."""
    return theme_tokens(theme, accent) + BASE_CSS
