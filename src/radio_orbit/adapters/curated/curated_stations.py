"""Built-in curated station table.

Known-good streams that patch gaps in the federated directory. Keys are
country display names; entry order is the order stations are surfaced in.
"""

from radio_orbit.domain.models.curated_entry import CuratedEntry

_STW = "https://playerservices.streamtheworld.com/api/livestream-redirect"

CURATED_STATIONS: dict[str, list[CuratedEntry]] = {
    "USA": [
        CuratedEntry(
            name="670 The Score (WSCR)",
            url="https://live.amperwave.net/manifest/audacy-wscramaac-hlsc.m3u8",
            city="Chicago",
            tags="sports,talk,news",
        ),
        CuratedEntry(
            name="NPR News",
            url="https://npr-ice.streamguys1.com/live.mp3",
            city="Washington",
            tags="news,talk,public",
        ),
        CuratedEntry(
            name="KEXP 90.3",
            url="https://kexp-mp3-128.streamguys1.com/kexp128.mp3",
            city="Seattle",
            tags="alternative,indie",
        ),
        CuratedEntry(
            name="KMNO 91.7 FM Mana'o Radio",
            url="https://ice6.securenetsystems.net/KMNO",
            city="Wailuku",
            state="Hawaii",
            tags="eclectic,community",
            geo_lat=20.8893,
            geo_long=-156.4729,
        ),
        CuratedEntry(
            name="93.5 KPOA",
            url="https://pacificmedia.cdnstream1.com/2794_64.aac",
            city="Lahaina",
            state="Hawaii",
            tags="hawaiian,reggae",
            geo_lat=20.8783,
            geo_long=-156.6778,
        ),
        CuratedEntry(
            name="Hi92 (KLHI-FM)",
            url="https://pacificmedia.cdnstream1.com/2796_64.aac",
            city="Kahului",
            state="Hawaii",
            tags="hits,pop",
            geo_lat=20.8853,
            geo_long=-156.4592,
        ),
    ],
    "Canada": [
        CuratedEntry(
            name="CHUM 104.5 FM",
            url=f"{_STW}/CHUMFMAAC.aac",
            city="Toronto",
            state="Ontario",
            tags="hits,pop,hot ac",
            geo_lat=43.6532,
            geo_long=-79.3832,
        ),
        CuratedEntry(
            name="JAZZ.FM91",
            url="https://jazzfm91.streamb.live/SB00024",
            city="Toronto",
            state="Ontario",
            tags="jazz,community",
            geo_lat=43.6532,
            geo_long=-79.3832,
        ),
        CuratedEntry(
            name="Sauga 960 AM",
            url="https://us1.streamingpulse.com/ssl/7172",
            city="Mississauga",
            state="Ontario",
            tags="talk,news,community",
            geo_lat=43.5890,
            geo_long=-79.6441,
        ),
        CuratedEntry(
            name="TSN 1050 (CHUM)",
            url=f"{_STW}/CHUMAMAAC.aac",
            city="Toronto",
            state="Ontario",
            tags="sports,talk,news",
        ),
        CuratedEntry(
            name="Bounce Radio 92.3 FM",
            url=f"{_STW}/CKXFMAAC.aac",
            city="Owen Sound",
            state="Ontario",
            tags="hits,pop,variety",
        ),
        CuratedEntry(
            name="Zoomer Radio 740 AM",
            url="https://live.amperwave.net/manifest/mzmedia-cfzmamaac-hls2.m3u8",
            city="Toronto",
            state="Ontario",
            tags="oldies,classic",
        ),
        CuratedEntry(
            name="Ondas FM 91.9",
            url="https://streaming1.locucionar.com/proxy/ondasfm?mp=/stream",
            city="Toronto",
            tags="spanish,latin,hits",
        ),
        CuratedEntry(
            name="CHHA 1610 AM",
            url="https://ice24.securenetsystems.net/CHHA",
            city="Toronto",
            tags="spanish,latin,community",
        ),
    ],
    "Mexico": [
        CuratedEntry(
            name="Radio Turquesa",
            url="https://stream.miradio.in/proxy/t1027/live",
            city="Cancun",
            state="Quintana Roo",
            tags="hits,pop,variety",
            geo_lat=21.1619,
            geo_long=-86.8515,
        ),
    ],
    "Colombia": [
        CuratedEntry(
            name="Radio Uno Ibagué",
            url="http://streamer5.rightclickitservices.com:9790/stream",
            city="Ibagué",
            tags="popular,vallenato,hits",
            geo_lat=4.4333,
            geo_long=-75.2333,
        ),
        CuratedEntry(
            name="Click Latino 99.5 FM",
            url="https://radiohd2.streaminghd.co:7895/stream",
            city="Cali",
            tags="tropical,latin,hits",
            geo_lat=3.4516,
            geo_long=-76.5320,
        ),
        CuratedEntry(
            name="Candela Stereo Bogotá 101.9 FM",
            url=f"{_STW}/CANDELAESTEREO.mp3",
            city="Bogotá",
            tags="tropical,popular,hits",
            geo_lat=4.6097,
            geo_long=-74.0817,
        ),
        CuratedEntry(
            name="Ecos del Combeima",
            url="http://s2.viastreaming.net:8030/;",
            city="Ibagué",
            tags="news,talk,variety",
            geo_lat=4.4333,
            geo_long=-75.2333,
        ),
        CuratedEntry(
            name="Olímpica Stereo Armenia",
            url=f"{_STW}/OLP_ARMENIAAAC.aac",
            city="Armenia",
            tags="tropical,salsa,hits",
            geo_lat=4.5350,
            geo_long=-75.6757,
        ),
        CuratedEntry(
            name="Olímpica Stereo Cúcuta",
            url=f"{_STW}/OLP_CUCUTAAAC.aac",
            city="Cúcuta",
            tags="tropical,salsa,hits",
            geo_lat=7.8939,
            geo_long=-72.5078,
        ),
        CuratedEntry(
            name="Olímpica Stereo Santa Marta",
            url=f"{_STW}/OLP_SANTA_MARTAAAC.aac",
            city="Santa Marta",
            tags="tropical,salsa,hits",
            geo_lat=11.2408,
            geo_long=-74.1990,
        ),
        CuratedEntry(
            name="Olímpica Stereo Manizales",
            url=f"{_STW}/OLP_MANIZALESAAC.aac",
            city="Manizales",
            tags="tropical,salsa,hits",
            geo_lat=5.0689,
            geo_long=-75.5174,
        ),
        CuratedEntry(
            name="Olímpica Stereo Neiva",
            url=f"{_STW}/OLP_NEIVAAAC.aac",
            city="Neiva",
            tags="tropical,salsa,hits",
            geo_lat=2.9273,
            geo_long=-75.2819,
        ),
        CuratedEntry(
            name="Olímpica Stereo Valledupar",
            url=f"{_STW}/OLP_VALLEDUPARAAC.aac",
            city="Valledupar",
            tags="tropical,salsa,hits",
            geo_lat=10.4631,
            geo_long=-73.2532,
        ),
        CuratedEntry(
            name="Olímpica Stereo Pereira",
            url=f"{_STW}/OLP_PEREIRAAAC.aac",
            city="Pereira",
            tags="tropical,salsa,hits",
            geo_lat=4.8133,
            geo_long=-75.6961,
        ),
        CuratedEntry(
            name="Olímpica Stereo Villavicencio",
            url=f"{_STW}/OLP_VILLAVICENCIOAAC.aac",
            city="Villavicencio",
            tags="tropical,salsa,hits",
            geo_lat=4.1420,
            geo_long=-73.6266,
        ),
        CuratedEntry(
            name="La FM Plus Bucaramanga",
            url="https://mdstrm.com/audio/632cc62fbc02c60329992b93/live.m3u8",
            city="Bucaramanga",
            tags="news,talk,hits",
            geo_lat=7.1193,
            geo_long=-73.1227,
        ),
        CuratedEntry(
            name="Alerta Cartagena 1270 AM",
            url="https://mdstrm.com/audio/632cc8862f44cf6996467d24/live.m3u8",
            city="Cartagena",
            tags="news,community,talk",
            geo_lat=10.3910,
            geo_long=-75.4794,
        ),
        CuratedEntry(
            name="La 91 (Banco Magdalena)",
            url="https://streaming.radiosenlinea.com.ar:10871/;",
            city="El Banco",
            tags="hits,pop,latin",
            geo_lat=9.0007,
            geo_long=-73.9723,
        ),
        CuratedEntry(
            name="Antena 2 Colombia",
            url="https://mdstrm.com/audio/632c9b439234f869e9a50e2b/live.m3u8",
            city="Bogotá",
            tags="sports,news,talk",
            geo_lat=4.7110,
            geo_long=-74.0721,
        ),
        CuratedEntry(
            name="La FM Cali",
            url="https://mdstrm.com/audio/632cb714202d6801a3178462/live.m3u8",
            city="Cali",
            tags="news,talk,pop",
            geo_lat=3.4516,
            geo_long=-76.5320,
        ),
        CuratedEntry(
            name="Tropicana Stereo Cartagena",
            url=f"{_STW}/TR_CARTAGENAAAC.aac",
            city="Cartagena",
            tags="tropical,salsa,hits",
            geo_lat=10.3910,
            geo_long=-75.4794,
        ),
        CuratedEntry(
            name="Caracol Radio Cartagena 1170 AM",
            url=f"{_STW}/CR_AM_CARTAGENA.mp3",
            city="Cartagena",
            tags="news,talk,sports",
            geo_lat=10.3910,
            geo_long=-75.4794,
        ),
        CuratedEntry(
            name="La Fm Cartagena 1000 AM",
            url="https://mdstrm.com/audio/632cca662f44cf6996467d6c/live.m3u8",
            city="Cartagena",
            tags="news,talk,hits",
            geo_lat=10.3910,
            geo_long=-75.4794,
        ),
        CuratedEntry(
            name="La Mega Cartagena 94.5 FM",
            url="https://mdstrm.com/audio/632cca2248f73909a614ac30/icecast.audio",
            city="Cartagena",
            tags="urban,reggaeton,pop",
            geo_lat=10.3910,
            geo_long=-75.4794,
        ),
        CuratedEntry(
            name="El Sol Cartagena 102.5 FM",
            url="https://mdstrm.com/audio/632ccbb99234f869e9a51955/icecast.audio",
            city="Cartagena",
            tags="salsa,tropical",
            geo_lat=10.3910,
            geo_long=-75.4794,
        ),
        CuratedEntry(
            name="Emisora Minuto de Dios 89.5 FM",
            url="https://stream.zeno.fm/4mty6w6y0u8uv",
            city="Cartagena",
            tags="religious,catholic",
            geo_lat=10.3910,
            geo_long=-75.4794,
        ),
        CuratedEntry(
            name="La Reina Cartagena 95.5 FM",
            url=f"{_STW}/RNA_CARTAGENA.mp3?dist=oro_web",
            city="Cartagena",
            tags="vallenato,tropical",
            geo_lat=10.3910,
            geo_long=-75.4794,
        ),
    ],
    "Spain": [
        CuratedEntry(
            name="Antena 2000",
            url="https://eu1.fastcast4u.com/proxy/antena2000?mp=/1",
            city="Barcelona",
            tags="hits,variety,latin",
            geo_lat=41.3851,
            geo_long=2.1734,
        ),
    ],
    "Uruguay": [
        CuratedEntry(
            name="CX 12 Radio Oriental 770 AM",
            url="http://radiolatina.live:7906/1",
            city="Montevideo",
            tags="talk,news,sports",
            geo_lat=-34.9011,
            geo_long=-56.1645,
        ),
        CuratedEntry(
            name="Radio Galaxia 105.9 FM",
            url="https://stream.zeno.fm/bf4gt1pem0quv",
            city="Montevideo",
            tags="pop,hits,dance",
            geo_lat=-34.9011,
            geo_long=-56.1645,
        ),
    ],
    "Chile": [
        CuratedEntry(
            name="Radio Navarino 104.5 FM",
            url="https://sonic.portalfoxmix.club/8130/stream",
            city="Puerto Williams",
            tags="community,talk,hits",
            geo_lat=-54.9333,
            geo_long=-67.6167,
        ),
    ],
    "Ecuador": [
        CuratedEntry(
            name="Radio Caravana 750 AM",
            url="https://streamingecuador.net:9006/stream",
            city="Guayaquil",
            tags="sports,talk,news",
            geo_lat=-2.1833,
            geo_long=-79.8833,
        ),
        CuratedEntry(
            name="Sonorama FM",
            url="https://stream.zeno.fm/pxbv57drdphvv",
            city="Quito",
            tags="news,talk,hits",
            geo_lat=-0.1807,
            geo_long=-78.4678,
        ),
    ],
}
