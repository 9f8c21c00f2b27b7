"""
Shared fixtures: trimmed-down copies of the pages each dictionary serves.
"""

import logging

import pytest

from bdic.extractors.bing import BingExtractor
from bdic.extractors.youdao import YoudaoExtractor
from bdic.fetchers.http import HttpResponse


BING_DEFINITION = """<!DOCTYPE html>
<html><body>
<div class="client_def_hd_hd">hello</div>
<div class="client_def_hd_pn_list"><div class="client_def_hd_pn">/həˈloʊ/</div></div>
<div class="client_def_hd_pn_list"><div class="client_def_hd_pn"></div></div>
<div class="client_def_container">
  <div class="client_def_bar">
    <span class="client_def_title_bar"><span class="client_def_title">int.</span></span>
    <span class="client_def_list"><span class="client_def_list_item">used as a greeting</span></span>
  </div>
  <div class="client_def_bar">
    <span class="client_def_title_bar">网络</span>
    <span class="client_def_list"><span class="client_def_list_word_Tag">Hello Kitty</span></span>
  </div>
</div>
<div class="client_word_change_word"> hellos </div>
<div class="client_word_change_word">  </div>
<div class="client_word_change_word">helloed</div>
<div class="client_sentence_list">
  <div class="client_sen_en">Say <span class="client_sentence_search">hello</span> to   him.</div>
  <div class="client_sen_cn">向他<span class="client_sen_cn_word">问好</span>。</div>
  <div class="client_sentence_list_link">dict.bing.com</div>
</div>
</body></html>
"""

BING_TRANSLATION = """<!DOCTYPE html>
<html><body>
<div class="client_trans_head">机器翻译</div>
<div class="client_sen_cn">  你好， 世界  </div>
</body></html>
"""

BING_SUGGESTIONS = """<!DOCTYPE html>
<html><body>
<div class="client_do_you_mean_title_bar">您要找的是不是:</div>
<div class="client_do_you_mean_area">
  <div class="client_do_you_mean_title">英汉词典</div>
  <div class="client_do_you_mean_list">
    <span class="client_do_you_mean_list_word">hello</span>
    <span class="client_do_you_mean_list_def">int. 喂</span>
  </div>
  <div class="client_do_you_mean_list">
    <span class="client_do_you_mean_list_word">hallo</span>
    <span class="client_do_you_mean_list_def">int. 嗨</span>
  </div>
</div>
<div class="client_do_you_mean_area">
  <div class="client_do_you_mean_title">汉英词典</div>
</div>
</body></html>
"""

YOUDAO_DEFINITION = """<!DOCTYPE html>
<html><body>
<div id="phrsListTab">
  <h2 class="wordbook-js">
    <span class="keyword">hello</span>
    <div class="baav">
      <span class="pronounce">英
        <span class="phonetic">[həˈləʊ]</span></span>
      <span class="pronounce">美
        <span class="phonetic">[həˈloʊ]</span></span>
    </div>
  </h2>
  <div class="trans-container">
    <ul>
      <li>int. 喂；哈罗，   你好</li>
      <li>   </li>
      <li>n. 表示问候</li>
    </ul>
    <p class="additional">[ 复数 hellos ]</p>
  </div>
</div>
<span class="star star4"></span>
<span class="rank">CET4</span>
<div class="pattern">( 复数
   hellos )</div>
<div id="discriminate">hello, hi 都是问候语</div>
<div id="authority">
  <ul class="ol">
    <li>
      <p>Say <b>hello</b> to your mother.</p>
      <p class="example-via"><a>Collins</a></p>
    </li>
    <li>
      <p>No citation here.</p>
    </li>
  </ul>
</div>
<div id="fanyiToggle"><div class="trans-container"><p>hello</p>
  <p>你好</p></div></div>
</body></html>
"""

YOUDAO_TYPO = """<!DOCTYPE html>
<html><body>
<div class="error-wrapper">
  <p class="error-typo">未找到与...相关的结果</p>
</div>
<span class="keyword">helo</span>
<span class="star star3"></span>
</body></html>
"""

NO_MARKERS = "<!DOCTYPE html><html><body><div class='content'>nothing</div></body></html>"


class FakeFetcher:
    """Stands in for HttpFetcher and records the requested URLs."""

    def __init__(self, response: HttpResponse) -> None:
        self.response = response
        self.urls = []

    async def fetch_text(self, url: str) -> HttpResponse:
        self.urls.append(url)
        return self.response


@pytest.fixture(autouse=True)
def fresh_logger():
    """Each test starts without the handler a previous CLI run attached."""
    logger = logging.getLogger("bdic")
    saved = logger.handlers[:]
    logger.handlers.clear()
    yield
    logger.handlers[:] = saved


@pytest.fixture
def bing():
    return BingExtractor(FakeFetcher(HttpResponse(url="", status=200, text="")), "https://bing.test/q=")


@pytest.fixture
def youdao():
    return YoudaoExtractor(FakeFetcher(HttpResponse(url="", status=200, text="")), "https://youdao.test/w/")
