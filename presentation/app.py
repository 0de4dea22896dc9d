"""Main application GUI"""
import io
import threading
from typing import Dict, List, Optional

import customtkinter as ctk
import requests
from PIL import Image

from application.playback_session import PlaybackSession
from application.video_search_service import VideoSearchService
from domain import CatalogVideo, IContentFetcher, ILogger, IVideoCatalog, SearchHit
from domain.time_utils import format_timecode
from infrastructure.media.opencv_player import OpenCVMediaPlayer
from infrastructure.localization import _

PALETTE = {
    "bg": "#0f1115",
    "surface": "#181b22",
    "surface_alt": "#1f232c",
    "card": "#242936",
    "primary": "#3b82f6",
    "primary_dark": "#2563eb",
    "text": "#f5f7fb",
    "muted": "#9ba1b6",
    "border": "#2f3442",
    "danger": "#ef4444",
    "danger_hover": "#dc2626",
}

HEADING_FONT = ("Inter", 20, "bold")
BODY_FONT = ("Inter", 13)
MONO_FONT = ("JetBrains Mono", 11)
PLAYER_WIDTH = 720

ctk.set_appearance_mode("Dark")
ctk.set_default_color_theme("dark-blue")


class ResultCard(ctk.CTkFrame):
    """Displays a single transcript hit with jump/play actions"""

    def __init__(self, master, hit: SearchHit, session: PlaybackSession, catalog: IVideoCatalog, **kwargs):
        super().__init__(
            master,
            corner_radius=14,
            border_width=1,
            border_color=PALETTE["border"],
            fg_color=PALETTE["card"],
            **kwargs
        )
        self.hit = hit
        self.session = session
        self.catalog = catalog
        self._build_ui()
        if hit.frame_url:
            self._load_thumbnail(catalog.to_absolute_media(hit.frame_url))

    def _build_ui(self):
        # Labels use the duration known now; playback re-normalizes on click
        target = self.session.range_for(self.hit)

        self.info_frame = ctk.CTkFrame(self, corner_radius=10, fg_color=PALETTE["primary"], width=90)
        self.info_frame.pack(side="left", fill="y", padx=(5, 10), pady=5)
        ctk.CTkLabel(self.info_frame, text=format_timecode(target.start), font=("Inter", 18, "bold"), text_color="white").pack(pady=(15, 5))
        ctk.CTkLabel(self.info_frame, text=_("card_score", score=f"{self.hit.score:.3f}"), font=("Inter", 12), text_color="#e2e8f0").pack(padx=8)
        if not target.is_empty():
            ctk.CTkLabel(self.info_frame, text=_("card_length", length=f"{target.duration():.1f}"), font=("Inter", 11), text_color="#e2e8f0").pack(padx=8, pady=(2, 0))

        self.preview_label = ctk.CTkLabel(self, text="", width=180)
        self.preview_label.pack(side="left", padx=(0, 10), pady=5)

        content = ctk.CTkFrame(self, fg_color="transparent")
        content.pack(side="left", fill="both", expand=True, padx=10, pady=5)
        ctk.CTkLabel(
            content,
            text=f"📜 \"{self.hit.text}\"",
            font=BODY_FONT,
            text_color=PALETTE["text"],
            wraplength=480,
            justify="left",
            anchor="w"
        ).pack(fill="x", pady=(5, 8))

        actions = ctk.CTkFrame(content, fg_color="transparent")
        actions.pack(fill="x", pady=(0, 4))
        ctk.CTkButton(
            actions,
            text=_("btn_jump", start=f"{target.start:.2f}"),
            font=("Inter", 11, "bold"),
            height=30,
            fg_color=PALETTE["surface"],
            hover_color=PALETTE["border"],
            command=lambda: self.session.jump_to_hit(self.hit)
        ).pack(side="left", padx=(0, 6))
        if target.is_empty():
            # Nothing to play between start and end
            return
        ctk.CTkButton(
            actions,
            text=_("btn_play_segment", start=f"{target.start:.2f}", end=f"{target.end:.2f}"),
            font=("Inter", 11, "bold"),
            height=30,
            fg_color=PALETTE["primary"],
            hover_color=PALETTE["primary_dark"],
            command=lambda: self.session.play_hit(self.hit)
        ).pack(side="left")

    def _load_thumbnail(self, url: str):
        def worker():
            try:
                response = requests.get(url, timeout=10)
                response.raise_for_status()
                img = Image.open(io.BytesIO(response.content))
                img.thumbnail((180, 120), Image.Resampling.LANCZOS)
            except (requests.exceptions.RequestException, OSError):
                return
            self.after(0, lambda: self._show_thumbnail(img))

        threading.Thread(target=worker, daemon=True).start()

    def _show_thumbnail(self, img: Image.Image):
        if not self.winfo_exists():
            return
        image = ctk.CTkImage(light_image=img, dark_image=img, size=(img.width, img.height))
        self.preview_label.configure(image=image)
        self.preview_label.image = image


class App(ctk.CTk):
    """Main application GUI: video library, player and transcript search"""

    def __init__(
        self,
        catalog: IVideoCatalog,
        search_service: VideoSearchService,
        fetcher: IContentFetcher,
        logger: Optional[ILogger] = None,
        duration_tolerance: float = 0.75
    ):
        super().__init__()
        self.catalog = catalog
        self.search_service = search_service
        self.logger = logger

        self.player = OpenCVMediaPlayer(dispatch=self._dispatch, logger=logger)
        self.session = PlaybackSession(
            self.player,
            fetcher,
            search_service=search_service,
            logger=logger,
            tolerance=duration_tolerance,
            dispatch=self._dispatch,
            resolve_locator=catalog.to_absolute_media,
        )
        self.videos: List[CatalogVideo] = []
        self.video_buttons: Dict[int, ctk.CTkButton] = {}
        self._search_busy = False

        self._setup_window()
        self._build_ui()
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self.refresh_videos()
        self.after(self.player.frame_interval_ms, self._tick)

    def _dispatch(self, fn):
        """Runs ``fn`` on the Tk thread"""
        self.after(0, fn)

    def _setup_window(self):
        self.title(_("app_title"))
        self.geometry("1280x800")
        self.configure(fg_color=PALETTE["bg"])
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.minsize(1100, 700)

    def _build_ui(self):
        """UI construction"""
        self.sidebar = ctk.CTkScrollableFrame(self, fg_color=PALETTE["surface"], corner_radius=0, width=300)
        self.sidebar.grid(row=0, column=0, sticky="nsew")
        self.sidebar.grid_columnconfigure(0, weight=1)

        self.main_panel = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.main_panel.grid(row=0, column=1, sticky="nsew", padx=12, pady=12)
        self.main_panel.grid_columnconfigure(0, weight=1)

        self._build_sidebar()
        self._build_main_area(self.main_panel)

    def _build_sidebar(self):
        ctk.CTkLabel(self.sidebar, text=_("sidebar_brand"), font=("Inter", 22, "bold"), text_color=PALETTE["text"]).grid(row=0, column=0, sticky="w", padx=18, pady=(18, 2))
        ctk.CTkLabel(self.sidebar, text=_("sidebar_brand_sub"), font=("Inter", 12), text_color=PALETTE["muted"]).grid(row=1, column=0, sticky="w", padx=18, pady=(0, 12))

        self.btn_refresh = ctk.CTkButton(self.sidebar, text=_("btn_refresh"), command=self.refresh_videos, fg_color=PALETTE["surface_alt"], hover_color=PALETTE["border"])
        self.btn_refresh.grid(row=2, column=0, sticky="ew", padx=18, pady=(0, 6))
        self.btn_delete = ctk.CTkButton(self.sidebar, text=_("btn_delete"), command=self.confirm_delete, fg_color=PALETTE["danger"], hover_color=PALETTE["danger_hover"], state="disabled")
        self.btn_delete.grid(row=3, column=0, sticky="ew", padx=18, pady=(0, 12))

        self.video_list = ctk.CTkFrame(self.sidebar, fg_color="transparent")
        self.video_list.grid(row=4, column=0, sticky="nsew", padx=12)
        self.video_list.grid_columnconfigure(0, weight=1)

    def _build_main_area(self, parent):
        self.lbl_title = ctk.CTkLabel(parent, text=_("no_video_selected"), font=HEADING_FONT, text_color=PALETTE["text"], anchor="w")
        self.lbl_title.grid(row=0, column=0, sticky="ew", pady=(0, 8))

        self.video_label = ctk.CTkLabel(parent, text="", width=PLAYER_WIDTH, height=405, fg_color="black", corner_radius=12)
        self.video_label.grid(row=1, column=0, pady=(0, 10))

        search_row = ctk.CTkFrame(parent, fg_color="transparent")
        search_row.grid(row=2, column=0, sticky="ew")
        search_row.grid_columnconfigure(0, weight=1)
        self.query_entry = ctk.CTkEntry(search_row, placeholder_text=_("search_placeholder"), font=BODY_FONT, height=36)
        self.query_entry.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        self.query_entry.bind("<Return>", lambda _event: self.start_search())
        self.btn_search = ctk.CTkButton(search_row, text=_("btn_search"), width=120, height=36, command=self.start_search, fg_color=PALETTE["primary"], hover_color=PALETTE["primary_dark"])
        self.btn_search.grid(row=0, column=1)

        self.lbl_status = ctk.CTkLabel(parent, text="", font=MONO_FONT, text_color=PALETTE["muted"], anchor="w")
        self.lbl_status.grid(row=3, column=0, sticky="ew", pady=(6, 6))

        self.results_frame = ctk.CTkFrame(parent, fg_color="transparent")
        self.results_frame.grid(row=4, column=0, sticky="nsew")
        self.results_frame.grid_columnconfigure(0, weight=1)

    # library
    def refresh_videos(self):
        """Reloads the catalog in background"""
        self.btn_refresh.configure(state="disabled")

        def worker():
            try:
                videos = self.catalog.list_videos()
                self.after(0, lambda: self._show_videos(videos))
            except RuntimeError as e:
                self.after(0, lambda err=e: self._set_status(f"❌ {err}", "#f87171"))
            finally:
                self.after(0, lambda: self.btn_refresh.configure(state="normal"))

        threading.Thread(target=worker, daemon=True).start()

    def _show_videos(self, videos: List[CatalogVideo]):
        self.videos = videos
        for widget in self.video_list.winfo_children():
            widget.destroy()
        self.video_buttons = {}
        if not videos:
            ctk.CTkLabel(self.video_list, text=_("library_empty"), text_color=PALETTE["muted"]).grid(row=0, column=0, sticky="w", padx=6)
            return
        for row, video in enumerate(videos):
            duration = format_timecode(video.catalog_duration_seconds) if video.has_known_duration else "--:--"
            btn = ctk.CTkButton(
                self.video_list,
                text=f"{video.title}  ·  {duration}",
                anchor="w",
                fg_color=PALETTE["surface_alt"],
                hover_color=PALETTE["border"],
                command=lambda v=video: self.open_video(v)
            )
            btn.grid(row=row, column=0, sticky="ew", pady=3)
            self.video_buttons[video.id] = btn

    def open_video(self, video: CatalogVideo):
        for video_id, btn in self.video_buttons.items():
            btn.configure(fg_color=PALETTE["primary"] if video_id == video.id else PALETTE["surface_alt"])
        self.lbl_title.configure(text=video.title)
        self.btn_delete.configure(state="normal")
        self._clear_results()
        self.session.open_video(video)
        self._set_status(_("status_ready"), PALETTE["muted"])

    def confirm_delete(self):
        """Shows confirmation dialog for deleting the open video"""
        video = self.session.video
        if video is None:
            return
        dialog = ctk.CTkToplevel(self)
        dialog.title(_("confirm_delete_title"))
        dialog.geometry("400x220")
        dialog.resizable(False, False)
        dialog.attributes("-topmost", True)

        ctk.CTkLabel(dialog, text=_("confirm_delete_title"), font=("Inter", 16, "bold"), text_color=PALETTE["text"]).pack(pady=(20, 10))
        ctk.CTkLabel(dialog, text=_("confirm_delete_text", title=video.title), font=("Inter", 12), text_color=PALETTE["muted"], wraplength=350).pack(pady=(0, 20))

        btn_frame = ctk.CTkFrame(dialog, fg_color="transparent")
        btn_frame.pack(fill="x", padx=20, pady=10)

        def on_confirm():
            dialog.destroy()
            self._run_delete(video)

        ctk.CTkButton(btn_frame, text=_("btn_cancel"), fg_color=PALETTE["surface"], hover_color=PALETTE["border"], command=dialog.destroy, width=100).pack(side="left", expand=True, padx=(0, 10))
        ctk.CTkButton(btn_frame, text=_("btn_delete"), fg_color=PALETTE["danger"], hover_color=PALETTE["danger_hover"], command=on_confirm, width=100).pack(side="left", expand=True)
        dialog.grab_set()

    def _run_delete(self, video: CatalogVideo):
        def worker():
            try:
                self.catalog.delete_video(video.id)
            except RuntimeError as e:
                self.after(0, lambda err=e: self._set_status(f"❌ {err}", "#f87171"))
                return
            self.search_service.forget(video.id)
            self.after(0, lambda: self._set_status(_("status_deleted", title=video.title), "#22c55e"))
            self.after(0, self.refresh_videos)

        threading.Thread(target=worker, daemon=True).start()

    # search
    def start_search(self):
        video = self.session.video
        query = self.query_entry.get().strip()
        if video is None or not query or self._search_busy:
            return
        self._search_busy = True
        self.btn_search.configure(state="disabled", text=_("btn_searching"))
        self._set_status(_("status_searching"), PALETTE["muted"])

        def worker():
            try:
                hits = self.search_service.search(video.id, query)
                self.after(0, lambda: self._show_results(video, hits))
            except RuntimeError as e:
                self.after(0, lambda err=e: self._set_status(f"❌ {err}", "#f87171"))
            finally:
                self.after(0, self._search_finished)

        threading.Thread(target=worker, daemon=True).start()

    def _search_finished(self):
        self._search_busy = False
        self.btn_search.configure(state="normal", text=_("btn_search"))

    def _show_results(self, video: CatalogVideo, hits: List[SearchHit]):
        if self.session.video is None or self.session.video.id != video.id:
            return
        self._clear_results()
        if not hits:
            self._set_status(_("status_no_match"), PALETTE["muted"])
            return
        self._set_status(_("status_matches", count=len(hits)), PALETTE["muted"])
        self.session.play_hit(hits[0])
        for row, hit in enumerate(hits):
            card = ResultCard(self.results_frame, hit, self.session, self.catalog)
            card.grid(row=row, column=0, sticky="ew", pady=6)

    def _clear_results(self):
        for widget in self.results_frame.winfo_children():
            widget.destroy()

    # player loop
    def _tick(self):
        self.player.tick()
        frame = self.player.current_frame()
        if frame is not None:
            self._render_frame(frame)
        self.after(self.player.frame_interval_ms, self._tick)

    def _render_frame(self, frame):
        img = Image.fromarray(frame)
        height = int(PLAYER_WIDTH * img.height / img.width) if img.width else 405
        image = ctk.CTkImage(light_image=img, dark_image=img, size=(PLAYER_WIDTH, height))
        self.video_label.configure(image=image)
        self.video_label.image = image

    def _set_status(self, text: str, color: Optional[str] = None):
        self.lbl_status.configure(text=text, text_color=color or PALETTE["text"])

    def _on_close(self):
        self.session.close()
        self.player.close()
        self.destroy()
