"""Sidebar state — slide-out navigation panel."""

import reflex as rx

from tarjama.services.animation import AOS_REFRESH_SCRIPT


class SidebarState(rx.State):
    sidebar_open: bool = False

    def open_sidebar(self):
        self.sidebar_open = True
        return rx.call_script(AOS_REFRESH_SCRIPT)

    def close_sidebar(self):
        self.sidebar_open = False
        return rx.call_script(AOS_REFRESH_SCRIPT)

    def toggle_sidebar(self):
        self.sidebar_open = not self.sidebar_open
        return rx.call_script(AOS_REFRESH_SCRIPT)
