#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

"""Built-in Vim command catalogue.

The scanner appends <CR> after every scan, so codes never carry a trailing
newline. Most entries are ex commands where Enter is expected anyway.
"""

from __future__ import annotations

from ..core.models import Catalogue

VIM_COMMANDS: tuple[tuple[str, str, str], ...] = (
    # Files: write / quit / reload / sudo tricks
    (":w", ":w", "Write current file"),
    (":wa", ":wa", "Write all files"),
    (":q", ":q", "Quit (fails if unsaved)"),
    (":wq", ":wq", "Write & quit"),
    (":wqa", ":wqa", "Write & quit all"),
    (":x", ":x", "Write if changed & quit"),
    (":q!", ":q!", "Force quit without saving"),
    (":w!", ":w!", "Force write (read-only files)"),
    (":e!", ":e!", "Reload file (discard changes)"),
    (":up", ":up", "Write only if buffer changed"),
    (":w ++ff=unix", ":w ++ff=unix", "Write with Unix fileformat"),
    (":w ++ff=dos", ":w ++ff=dos", "Write with DOS fileformat"),
    (":!sudo tee %", ":!sudo tee %", "Write as root via sudo tee"),

    # Buffer / file navigation
    (":ls", ":ls", "List buffers"),
    (":bnext", ":bnext", "Next buffer"),
    (":bprev", ":bprev", "Previous buffer"),
    (":bfirst", ":bfirst", "First buffer"),
    (":blast", ":blast", "Last buffer"),
    (":b#", ":b#", "Alternate buffer"),
    (":bd", ":bd", "Delete current buffer"),
    (":bufdo wqa", ":bufdo wqa", "Write & quit all buffers"),
    (":edit .", ":edit .", "Open file explorer (netrw)"),
    (":Explore", ":Explore", "Netrw file explorer"),
    (":Hexplore", ":Hexplore", "Horizontal explorer split"),
    (":Vexplore", ":Vexplore", "Vertical explorer split"),

    # Windows & splits
    (":sp", ":sp", "Horizontal split"),
    (":vsp", ":vsp", "Vertical split"),
    (":only", ":only", "Close all other windows"),
    (":close", ":close", "Close current window"),
    (":new", ":new", "New empty window"),
    (":vnew", ":vnew", "New empty vertical split"),
    (":wincmd = ", ":wincmd =", "Equalize split sizes"),
    (":wincmd H", ":wincmd H", "Move window to far left"),
    (":wincmd J", ":wincmd J", "Move window to bottom"),
    (":wincmd K", ":wincmd K", "Move window to top"),
    (":wincmd L", ":wincmd L", "Move window to far right"),

    # Tabs
    (":tabnew", ":tabnew", "New tab"),
    (":tabclose", ":tabclose", "Close current tab"),
    (":tabonly", ":tabonly", "Close all other tabs"),
    (":tabnext", ":tabnext", "Next tab"),
    (":tabprev", ":tabprev", "Previous tab"),
    (":tabmove 0", ":tabmove 0", "Move tab to front"),
    (":tabmove$", ":tabmove$", "Move tab to end"),

    # Search & highlight behaviour
    (":noh", ":noh", "Clear search highlight"),
    (":set hlsearch", "hlsearch", "Highlight all search matches"),
    (":set nohlsearch", "nohlsearch", "Disable search highlight"),
    (":set incsearch", "incsearch", "Incremental search"),
    (":set noincsearch", "noincsearch", "Disable incremental search"),
    (":set ignorecase", "ignorecase", "Case-insensitive search"),
    (":set noignorecase", "noignorecase", "Case-sensitive search"),
    (":set smartcase", "smartcase", "Smart case search"),
    (":set nosmartcase", "nosmartcase", "Disable smart case"),

    # Indent / tabs / formatting
    (":set autoindent", "autoindent", "Enable auto indent"),
    (":set noautoindent", "noautoindent", "Disable auto indent"),
    (":set smartindent", "smartindent", "Enable smart indent"),
    (":set nosmartindent", "nosmartindent", "Disable smart indent"),
    (":set expandtab", "expandtab", "Convert tabs to spaces"),
    (":set noexpandtab", "noexpandtab", "Keep literal tabs"),
    (":set tabstop=2", "ts=2", "Tab width = 2"),
    (":set tabstop=4", "ts=4", "Tab width = 4"),
    (":set shiftwidth=2", "sw=2", "Indent width = 2"),
    (":set shiftwidth=4", "sw=4", "Indent width = 4"),
    (":set softtabstop=2", "sts=2", "Soft tabstop = 2"),
    (":set softtabstop=4", "sts=4", "Soft tabstop = 4"),
    (":retab", ":retab", "Convert indentation to current settings"),

    # Background / colours / UI tweaks
    (":set background=dark", "bg=dark", "Dark background"),
    (":set background=light", "bg=light", "Light background"),
    (":set number", "number", "Show line numbers"),
    (":set nonumber", "nonumber", "Hide line numbers"),
    (":set relativenumber", "relativenumber", "Relative line numbers"),
    (":set norelativenumber", "norelativenumber", "Disable relative numbers"),
    (":set cursorline", "cursorline", "Highlight current line"),
    (":set nocursorline", "nocursorline", "Disable line highlight"),
    (":set list", "list", "Show invisible chars"),
    (":set nolist", "nolist", "Hide invisible chars"),
    (":set wrap", "wrap", "Wrap long lines"),
    (":set nowrap", "nowrap", "No wrap; horizontal scroll"),
    (":set colorcolumn=80", "cc=80", "Mark column 80"),
    (":set colorcolumn=", "cc=", "Clear colorcolumn"),
    (":set showmatch", "showmatch", "Briefly jump to matching bracket"),
    (":set noshowmatch", "noshowmatch", "Disable showmatch"),
    (":set ruler", "ruler", "Show cursor position"),
    (":set noruler", "noruler", "Hide ruler"),
    (":set showcmd", "showcmd", "Show partial commands"),
    (":set noshowcmd", "noshowcmd", "Hide partial commands"),

    # Spellchecking
    (":set spell", "spell", "Enable spell checking"),
    (":set nospell", "nospell", "Disable spell checking"),
    (":set spelllang=en_au", "spelllang=en_au", "Set spell lang to en_au"),
    (":set spelllang=en_gb", "spelllang=en_gb", "Set spell lang to en_gb"),

    # Mouse / paste / misc convenience
    (":set mouse=a", "mouse=a", "Enable mouse in all modes"),
    (":set mouse=", "mouse=", "Disable mouse"),
    (":set paste", "paste", "Enable paste mode"),
    (":set nopaste", "nopaste", "Disable paste mode"),
    (":set clipboard=unnamedplus", "clipboard=unnamedplus", "Use system clipboard"),
    (":set clipboard=", "clipboard=", "Use default Vim registers"),
    (":set foldmethod=indent", "fold=indent", "Fold by indent level"),
    (":set foldmethod=manual", "fold=manual", "Manual folding"),
    (":set foldenable", "foldenable", "Enable folding"),
    (":set nofoldenable", "nofoldenable", "Disable folding"),

    # Global substitutions & quick refactors
    (":%s/old/new/g", ":%s/old/new/g", "Substitute in whole file"),
    (":%s/old/new/gc", ":%s/old/new/gc", "Substitute with confirm"),
    (":%s/\\s\\+$//e", ":%s/\\s\\+$//e", "Strip trailing whitespace"),
    (":g/DEBUG/d", ":g/DEBUG/d", "Delete all lines containing DEBUG"),
    (":vimgrep /TODO/ **/*", ":vimgrep /TODO/ **/*", "Search TODO in project"),
    (":copen", ":copen", "Open quickfix window"),
    (":cclose", ":cclose", "Close quickfix window"),
)


def default_catalogue() -> Catalogue:
    return Catalogue.from_rows(VIM_COMMANDS)
