"""
Brandability scorer.

Pure functions rating how pronounceable, short, clean, phonetically
balanced and memorable a domain name is. Used as one factor of the
valuation engine.

Score composition (0-100):
- pronounceability 0-25
- length 0-20
- cleanness 0-20 (hyphens and digits)
- phonetics 0-20 (vowel/consonant balance, repeats, word endings)
- memorability 0-15
"""

import re
from dataclasses import dataclass

from domain_recovery.scoring import clamp, round_half_up


VOWELS = frozenset("aeiou")
CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")

# Bigrams that occur often in English words and are easy to say
PRONOUNCEABLE_BIGRAMS = frozenset({
    'th', 'he', 'in', 'er', 'an', 'en', 'on', 'at', 'es', 'ed',
    'or', 'te', 'of', 'it', 'al', 'ar', 'st', 'to', 'nt', 'is',
    'ha', 'ou', 'ng', 'se', 'me', 'le', 'no', 'ne', 'de', 'do',
    'ri', 'ro', 'co', 'ma', 'li', 'la', 'el', 'di', 'si', 'ra',
    'io', 'be', 'lo', 'ti', 'ta', 'ca', 'ce', 'ch', 'sh', 'tr',
    'pr', 'pl', 'cl', 'cr', 'br', 'bl', 'fr', 'fl', 'gr', 'gl',
    'sp', 'sk', 'sl', 'sm', 'sn', 'sw', 'dr', 'tw', 'wr', 'sc',
    'wa', 'wi', 'we', 'wo', 'un', 'up', 'us', 'ab', 'ad', 'ag',
    'am', 'ap', 'as', 'ba', 'bi', 'bo', 'bu', 'da', 'du', 'ef',
    'em', 'ev', 'ex', 'fa', 'fi', 'fo', 'fu', 'ga', 'ge', 'gi',
    'go', 'gu', 'hi', 'ho', 'hu', 'hy', 'id', 'ig', 'im', 'ir',
    'ja', 'jo', 'ju', 'ke', 'ki', 'ku', 'lu', 'mi', 'mo', 'mu',
    'na', 'ni', 'nu', 'ob', 'oc', 'od', 'og', 'ol', 'om', 'op',
    'os', 'ot', 'ov', 'ow', 'ox', 'pa', 'pe', 'pi', 'po', 'pu',
    'qu', 're', 'ru', 'sa', 'so', 'su', 'sy', 'tu', 'ul', 'um',
    'ur', 'ut', 'va', 've', 'vi', 'vo', 'vu', 'ye', 'yo', 'za',
})

# Letter pairs that are awkward to pronounce
HARD_BIGRAMS = frozenset({
    'bk', 'bq', 'bx', 'bz', 'cb', 'cf', 'cg', 'cj', 'cp', 'cv',
    'cw', 'cx', 'cz', 'db', 'dc', 'df', 'dg', 'dk', 'dm', 'dn',
    'dp', 'dq', 'dt', 'dv', 'dw', 'dx', 'dz', 'fb', 'fc', 'fd',
    'fg', 'fh', 'fj', 'fk', 'fm', 'fn', 'fp', 'fq', 'fv', 'fw',
    'fx', 'fz', 'gb', 'gc', 'gd', 'gf', 'gj', 'gk', 'gm', 'gn',
    'gp', 'gq', 'gt', 'gv', 'gw', 'gx', 'gz', 'hb', 'hc', 'hd',
    'hf', 'hg', 'hh', 'hj', 'hk', 'hl', 'hm', 'hn', 'hp', 'hq',
    'hr', 'hs', 'ht', 'hv', 'hw', 'hx', 'hz', 'jb', 'jc', 'jd',
    'jf', 'jg', 'jh', 'jj', 'jk', 'jl', 'jm', 'jn', 'jp', 'jq',
    'jr', 'js', 'jt', 'jv', 'jw', 'jx', 'jz', 'kb', 'kc', 'kd',
    'kf', 'kg', 'kh', 'kj', 'kk', 'km', 'kp', 'kq', 'kt', 'kv',
    'kw', 'kx', 'kz', 'lk', 'lq', 'lx', 'lz', 'mj', 'mk', 'mq',
    'mv', 'mx', 'mz', 'nj', 'nq', 'nx', 'nz', 'pb', 'pc', 'pd',
    'pf', 'pg', 'pj', 'pk', 'pm', 'pn', 'pq', 'pv', 'pw', 'px',
    'pz', 'qa', 'qb', 'qc', 'qd', 'qe', 'qf', 'qg', 'qh', 'qi',
    'qj', 'qk', 'ql', 'qm', 'qn', 'qo', 'qp', 'qq', 'qr', 'qs',
    'qt', 'qv', 'qw', 'qx', 'qy', 'qz', 'rj', 'rq', 'rx', 'rz',
    'sb', 'sd', 'sf', 'sg', 'sj', 'sq', 'sr', 'sv', 'sx', 'sz',
    'tb', 'tc', 'td', 'tf', 'tg', 'tj', 'tk', 'tm', 'tn', 'tp',
    'tq', 'tv', 'tx', 'tz', 'vb', 'vc', 'vd', 'vf', 'vg', 'vh',
    'vj', 'vk', 'vl', 'vm', 'vn', 'vp', 'vq', 'vr', 'vs', 'vt',
    'vv', 'vw', 'vx', 'vz', 'wb', 'wc', 'wd', 'wf', 'wg', 'wj',
    'wk', 'wl', 'wm', 'wn', 'wp', 'wq', 'wt', 'wv', 'ww', 'wx',
    'wz', 'xb', 'xc', 'xd', 'xf', 'xg', 'xh', 'xj', 'xk', 'xl',
    'xm', 'xn', 'xo', 'xp', 'xq', 'xr', 'xs', 'xt', 'xv', 'xw',
    'xx', 'xz', 'yb', 'yc', 'yd', 'yf', 'yg', 'yh', 'yj', 'yk',
    'yl', 'ym', 'yn', 'yp', 'yq', 'yr', 'yt', 'yv', 'yw', 'yx',
    'yy', 'yz', 'zb', 'zc', 'zd', 'zf', 'zg', 'zh', 'zj', 'zk',
    'zl', 'zm', 'zn', 'zp', 'zq', 'zr', 'zs', 'zt', 'zv', 'zw',
    'zx', 'zz',
})

COMMON_SUFFIXES = (
    'ly', 'er', 'le', 'ify', 'ful', 'ous', 'ive', 'tion', 'ment',
    'able', 'ible', 'ity', 'ness',
)

CONSONANT_CLUSTER = re.compile(r'[bcdfghjklmnpqrstvwxyz]{4,}')
REPEATED_CHAR = re.compile(r'(.)\1{2,}')
NON_LETTERS = re.compile(r'[^a-z]')


@dataclass(frozen=True)
class BrandabilityBreakdown:
    """Per-dimension points. Sums to the total score."""

    pronounceability: int  # 0-25
    length: int  # 0-20
    cleanness: int  # 0-20
    phonetics: int  # 0-20
    memorability: int  # 0-15


@dataclass(frozen=True)
class BrandabilityResult:
    """Brandability score with breakdown and human-readable flags."""

    score: int  # 0-100
    breakdown: BrandabilityBreakdown
    flags: tuple[str, ...]


def is_pronounceable(word: str) -> int:
    """
    Score how easy a word is to pronounce.

    Args:
        word: Any string; non-letters are ignored

    Returns:
        Score from 0 (unpronounceable) to 100
    """
    clean = NON_LETTERS.sub("", word.lower())
    if len(clean) == 0:
        return 0
    if len(clean) == 1:
        return 80
    if len(clean) == 2:
        return 70

    bigrams = [clean[i:i + 2] for i in range(len(clean) - 1)]
    pronounceable_ratio = sum(1 for b in bigrams if b in PRONOUNCEABLE_BIGRAMS) / len(bigrams)
    hard_ratio = sum(1 for b in bigrams if b in HARD_BIGRAMS) / len(bigrams)

    cluster_penalty = len(CONSONANT_CLUSTER.findall(clean)) * 20

    vowel_ratio = sum(1 for c in clean if c in VOWELS) / len(clean)
    vowel_bonus = 10 if 0.25 <= vowel_ratio <= 0.55 else 0

    score = 50
    score += pronounceable_ratio * 40
    score -= hard_ratio * 50
    score -= cluster_penalty
    score += vowel_bonus

    return int(clamp(round_half_up(score), 0, 100))


def estimate_syllables(word: str) -> int:
    """Rough syllable count: vowel groups, minus a silent trailing 'e'."""
    clean = NON_LETTERS.sub("", word.lower())
    if len(clean) <= 2:
        return 1

    count = 0
    previous_vowel = False
    for char in clean:
        vowel = char in VOWELS
        if vowel and not previous_vowel:
            count += 1
        previous_vowel = vowel

    if clean.endswith("e") and count > 1:
        count -= 1

    return max(1, count)


def score_brandability(domain: str) -> BrandabilityResult:
    """
    Score the brandability of a domain name.

    Args:
        domain: Domain or bare name; only the first label is scored

    Returns:
        BrandabilityResult with total score, breakdown and flags
    """
    name = domain.lower().split(".")[0]
    flags: list[str] = []

    # Pronounceability (0-25)
    pronounceability_raw = is_pronounceable(name)
    pronounceability = round_half_up(pronounceability_raw / 100 * 25)
    if pronounceability_raw >= 70:
        flags.append("Highly pronounceable")
    elif pronounceability_raw < 40:
        flags.append("Difficult to pronounce")

    # Length (0-20)
    name_length = len(name.replace("-", ""))
    if name_length <= 4:
        length_score = 20
    elif name_length <= 6:
        length_score = 18
    elif name_length <= 8:
        length_score = 14
    elif name_length <= 10:
        length_score = 10
    elif name_length <= 13:
        length_score = 6
    elif name_length <= 16:
        length_score = 3
    else:
        length_score = 1

    if name_length <= 5:
        flags.append("Short and memorable")
    elif name_length > 15:
        flags.append("Too long for easy branding")

    # Cleanness (0-20)
    cleanness = 20
    hyphen_count = name.count("-")
    has_digits = any(c.isdigit() for c in name)
    if hyphen_count:
        cleanness -= min(12, hyphen_count * 6)
        flags.append(f"Contains {hyphen_count} hyphen{'s' if hyphen_count > 1 else ''}")
    if has_digits:
        cleanness -= 6
        flags.append("Contains numbers")
    if "--" in name:
        cleanness -= 4
        flags.append("Contains double hyphens")
    cleanness = max(0, cleanness)

    # Phonetics (0-20)
    phonetics = 10
    letters = NON_LETTERS.sub("", name)
    if letters:
        ratio = sum(1 for c in letters if c in VOWELS) / len(letters)
        if 0.28 <= ratio <= 0.50:
            phonetics += 6
            flags.append("Good vowel/consonant balance")
        elif ratio < 0.15:
            phonetics -= 6
            flags.append("Too few vowels")
        elif ratio > 0.65:
            phonetics -= 4
            flags.append("Too many vowels")

    if REPEATED_CHAR.search(name):
        phonetics -= 4
        flags.append("Has repeating characters")

    if name.endswith(COMMON_SUFFIXES) and not hyphen_count:
        phonetics += 4
        flags.append("Natural word ending")

    phonetics = int(clamp(phonetics, 0, 20))

    # Memorability (0-15)
    memorability = 8
    if name_length <= 6 and not hyphen_count and not has_digits:
        memorability += 5

    syllables = estimate_syllables(name)
    if syllables <= 2:
        memorability += 2
        flags.append("Easy to remember (short syllable count)")
    elif syllables >= 5:
        memorability -= 3
        flags.append("Many syllables reduce memorability")

    memorability = int(clamp(memorability, 0, 15))

    total = pronounceability + length_score + cleanness + phonetics + memorability

    return BrandabilityResult(
        score=min(100, total),
        breakdown=BrandabilityBreakdown(
            pronounceability=pronounceability,
            length=length_score,
            cleanness=cleanness,
            phonetics=phonetics,
            memorability=memorability,
        ),
        flags=tuple(flags),
    )
