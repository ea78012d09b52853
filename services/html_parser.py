# services/html_parser.py

from __future__ import annotations

import logging
import re
from typing import List

from models.heading_models import Heading, HeadingNode

logger = logging.getLogger(__name__)

# 開きタグと閉じタグのレベルが一致するペアだけを拾う（<h2>..</h3> は対象外）。
# DOTALL は付けないので、1 行の中で閉じている見出しだけが対象。
HEADING_TAG = re.compile(r"<h([1-6])>(.*?)</h\1>", re.IGNORECASE)


def extract_headings(text: str) -> List[Heading]:
    """
    テキスト中の <h1>〜<h6> を文書順に抽出する。
    壊れたタグ・レベル不一致のタグは黙って読み飛ばす。
    """
    headings = [
        Heading(level=int(m.group(1)), text=m.group(2).strip())
        for m in HEADING_TAG.finditer(text)
    ]
    logger.debug("[html_parser] extracted headings=%s", len(headings))
    return headings


def build_heading_tree(headings: List[Heading]) -> List[HeadingNode]:
    """
    フラットな見出しリストから簡易的な階層ツリーを構築する。
    - 直前にある、自分よりレベルの小さい見出しの子になる。
    - 該当する親がいなければルートノード。
    """
    root_nodes: List[HeadingNode] = []
    stack: List[HeadingNode] = []

    for heading in headings:
        node = HeadingNode(level=heading.level, text=heading.text, children=[])

        # 自分以下のレベルをすべて pop して親を探す
        while stack and stack[-1].level >= heading.level:
            stack.pop()

        if not stack:
            root_nodes.append(node)
        else:
            stack[-1].children.append(node)

        stack.append(node)

    return root_nodes
